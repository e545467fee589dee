"""File I/O for the comic pipeline: decoding inputs and writing the PNG."""
import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from ..errors import AssetLoadError, EncodeError
from ..logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE = "template.png"
DEFAULT_MASK = "template_mask.png"
DEFAULT_BACKGROUND = "background"
DEFAULT_FONT = "Loveletter_TW.ttf"
DEFAULT_OUTPUT = "out.png"

@dataclass(frozen=True)
class ComicAssets:
    """Paths of every file a render reads or writes."""
    template: str = DEFAULT_TEMPLATE
    mask: str = DEFAULT_MASK
    background: str = DEFAULT_BACKGROUND
    font: str = DEFAULT_FONT
    output: str = DEFAULT_OUTPUT

def _open_decoded(path, label):
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except FileNotFoundError as e:
        raise AssetLoadError(f"{label} not found: {path}") from e
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise AssetLoadError(f"Unable to decode {label} {path}: {e}") from e

def load_image(path: str, label: str = "image") -> Image.Image:
    """Open and fully decode an image, converted to RGBA.

    Raises:
        AssetLoadError: If the file is missing or cannot be decoded
    """
    image = _open_decoded(path, label)
    logger.debug(f"Loaded {label} {path} ({image.width}x{image.height}, {image.mode})")
    return image if image.mode == 'RGBA' else image.convert('RGBA')

def load_mask(path: str) -> Image.Image:
    """Open the template mask, keeping its native mode (L, LA, RGBA...)."""
    mask = _open_decoded(path, "template mask")
    logger.debug(f"Loaded template mask {path} ({mask.width}x{mask.height}, {mask.mode})")
    return mask

def write_png(path: str, image: Image.Image) -> None:
    """Encode ``image`` as PNG at ``path``.

    Raises:
        EncodeError: If the file cannot be written
    """
    try:
        out_dir = os.path.dirname(path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        image.save(path, format='PNG')
    except (OSError, ValueError) as e:
        raise EncodeError(f"Unable to write image {path}: {e}") from e
    logger.info(f"Wrote {path} ({image.width}x{image.height})")
