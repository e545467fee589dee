"""Layout configuration for the three-panel comic."""
from dataclasses import dataclass, field
from itertools import combinations
from typing import Tuple

from .placement import NUM_PLACEMENTS, Placement
from .utils import Rectangle

PANEL_COUNT = 3

@dataclass(frozen=True)
class ComicLayoutConfig:
    """Fixed geometry and text styling of the comic.

    Built once at startup and passed explicitly to the renderer, compositor and
    scene assembler; nothing here changes during a render.
    """
    comic_width: int = 720
    comic_height: int = 275

    # Every panel shares this size and is moved to its own top-left offset
    panel_width: int = 212
    panel_height: int = 216
    panel_offsets: Tuple[Tuple[int, int], ...] = ((13, 37), (254, 37), (493, 38))

    font_size: int = 14
    text_padding: int = 3
    baseline_x: int = 30
    text_color: Tuple[int, int, int, int] = (0, 0, 0, 255)  # Black text (RGBA)
    box_color: Tuple[int, int, int, int] = (255, 255, 255, 255)  # White box (RGBA)

    # Used when placements are explicit and a caption gives none
    default_placement: Placement = Placement.TOP
    background_placement: Placement = Placement.TOP_MIDDLE

    panel_slots: Tuple[Rectangle, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate configuration values and build the panel slot table."""
        if self.comic_width <= 0 or self.comic_height <= 0:
            raise ValueError("comic dimensions must be positive")
        if self.panel_width <= 0 or self.panel_height <= 0:
            raise ValueError("panel dimensions must be positive")
        if self.font_size <= 0:
            raise ValueError("font_size must be positive")
        if self.text_padding < 0:
            raise ValueError("text_padding must be non-negative")
        if self.panel_height < NUM_PLACEMENTS:
            raise ValueError(f"panel_height must be at least {NUM_PLACEMENTS}")
        if len(self.panel_offsets) != PANEL_COUNT:
            raise ValueError(f"exactly {PANEL_COUNT} panel offsets are required, got {len(self.panel_offsets)}")
        if Placement(self.default_placement) is Placement.NONE:
            raise ValueError("default_placement must be a concrete placement")
        if Placement(self.background_placement) is Placement.NONE:
            raise ValueError("background_placement must be a concrete placement")

        slots = tuple(
            self.panel_rectangle.translate(x, y) for x, y in self.panel_offsets
        )
        comic = Rectangle(0, 0, self.comic_width, self.comic_height)
        for slot in slots:
            if not comic.contains(slot):
                raise ValueError(f"panel {slot} does not fit in the {self.comic_width}x{self.comic_height} comic")
        for first, second in combinations(slots, 2):
            if first.intersects(second):
                raise ValueError(f"panels {first} and {second} overlap")

        # frozen dataclass, so bypass __setattr__ for the derived table
        object.__setattr__(self, 'panel_slots', slots)

    @property
    def panel_rectangle(self) -> Rectangle:
        """The common panel-sized rectangle anchored at the origin."""
        return Rectangle(0, 0, self.panel_width, self.panel_height)

    @property
    def panel_count(self) -> int:
        return len(self.panel_slots)

    @property
    def comic_size(self) -> Tuple[int, int]:
        return self.comic_width, self.comic_height

    def panel_slot(self, index: int) -> Rectangle:
        """Scene rectangle of panel ``index``."""
        if not 0 <= index < self.panel_count:
            raise IndexError(f"panel index {index} out of range 0..{self.panel_count - 1}")
        return self.panel_slots[index]
