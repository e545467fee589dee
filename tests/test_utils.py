"""
Test utilities for comic rendering tests.
"""
import cv2
import numpy as np
from PIL import Image


def region(image: Image.Image, rect) -> np.ndarray:
    """Pixels of ``image`` inside ``rect`` as an RGBA array."""
    return np.asarray(image.convert('RGBA').crop(tuple(rect)))


class TextDetector:
    """Helper class for finding caption boxes and glyphs in rendered images."""

    def __init__(self, dark_threshold: int = 100, min_text_pixels: int = 5):
        """Initialize the text detector.

        Args:
            dark_threshold: Gray level below which an opaque pixel counts as ink
            min_text_pixels: Minimum ink pixels needed to report text
        """
        self.dark_threshold = dark_threshold
        self.min_text_pixels = min_text_pixels

    def ink_mask(self, pixels: np.ndarray) -> np.ndarray:
        """Boolean mask of opaque dark pixels."""
        gray = cv2.cvtColor(np.ascontiguousarray(pixels[:, :, :3]), cv2.COLOR_RGB2GRAY)
        _, dark = cv2.threshold(gray, self.dark_threshold, 255, cv2.THRESH_BINARY_INV)
        return (dark > 0) & (pixels[:, :, 3] > 0)

    def has_visible_text(self, pixels: np.ndarray) -> bool:
        """Check if the region contains dark glyph pixels."""
        return int(self.ink_mask(pixels).sum()) >= self.min_text_pixels

    def white_box_pixels(self, pixels: np.ndarray) -> int:
        """Count fully opaque pure white pixels."""
        return int(np.all(pixels == 255, axis=2).sum())

    def has_caption_box(self, pixels: np.ndarray, min_pixels: int = 50) -> bool:
        return self.white_box_pixels(pixels) >= min_pixels
