"""Caption values handed to the renderer and assembler."""
from dataclasses import dataclass
from typing import Iterable, List, Union

from ..logging_utils import get_logger
from .placement import Placement

logger = get_logger(__name__)

@dataclass(frozen=True)
class Caption:
    """One panel's text and its requested slot (NONE means derive from the text)."""
    text: str = ""
    placement: Placement = Placement.NONE

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"caption text must be a string, got {type(self.text).__name__}")
        object.__setattr__(self, 'placement', Placement(self.placement))

    @property
    def is_empty(self) -> bool:
        return self.text == ""


CaptionLike = Union[Caption, str]

def to_captions(items: Iterable[CaptionLike]) -> List[Caption]:
    """Normalize plain strings and Caption objects into a list of Captions.

    Args:
        items: Captions or bare strings (bare strings get automatic placement)

    Returns:
        list: Caption objects in panel order
    """
    captions = []
    for item in items:
        if isinstance(item, Caption):
            captions.append(item)
        else:
            captions.append(Caption(text=item))
    logger.trace(f"[CAPTION] Normalized {len(captions)} captions")
    return captions
