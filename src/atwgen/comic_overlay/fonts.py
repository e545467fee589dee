"""Font loading and text measurement."""
import io
import os
from typing import Dict, Union

from PIL import ImageFont

from ..errors import AssetLoadError
from ..logging_utils import get_logger

logger = get_logger(__name__)

class FontMetricsProvider:
    """Loads one outline font and answers ascent and advance-width queries.

    The font bytes are read and parsed once; faces are cached per size so that
    measuring and drawing always use the identical face.
    """

    def __init__(self, font_bytes: bytes, name: str = "<memory>"):
        """Parse ``font_bytes``.

        Args:
            font_bytes: Raw TrueType/OpenType data
            name: Label used in log and error messages

        Raises:
            AssetLoadError: If the bytes are empty or not a usable font
        """
        if not font_bytes:
            raise AssetLoadError(f"Font {name} is empty")
        self.name = name
        self._font_bytes = bytes(font_bytes)
        self._cached_fonts: Dict[Union[int, float], ImageFont.FreeTypeFont] = {}

        # Parse eagerly so a bad font fails before any drawing starts
        self.face(12)
        logger.debug(f"Loaded font {name} ({len(self._font_bytes)} bytes)")

    @classmethod
    def from_path(cls, path: str) -> "FontMetricsProvider":
        """Read a font file from disk.

        Raises:
            AssetLoadError: If the file is missing, unreadable or not a font
        """
        try:
            with open(path, 'rb') as font_file:
                font_bytes = font_file.read()
        except OSError as e:
            raise AssetLoadError(f"Unable to read font file {path}: {e}") from e
        return cls(font_bytes, name=os.path.basename(path))

    def face(self, size) -> ImageFont.FreeTypeFont:
        """Get the cached FreeType face for ``size`` pixels.

        Raises:
            AssetLoadError: If FreeType cannot parse the font
        """
        if size not in self._cached_fonts:
            try:
                self._cached_fonts[size] = ImageFont.truetype(io.BytesIO(self._font_bytes), size)
            except (OSError, ValueError) as e:
                raise AssetLoadError(f"Unable to parse font {self.name}: {e}") from e
        return self._cached_fonts[size]

    def ascent(self, size) -> int:
        """Pixels from the baseline to the top of typical glyphs."""
        ascent, _ = self.face(size).getmetrics()
        return ascent

    def advance_width(self, text: str, size) -> int:
        """Horizontal distance the pen moves when drawing ``text``, rounded to pixels."""
        if not text:
            return 0
        return round(self.face(size).getlength(text))
