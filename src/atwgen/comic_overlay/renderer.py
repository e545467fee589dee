"""Panel text rendering: slot and jitter, measured background box, then text."""
from typing import Tuple

from PIL import Image, ImageDraw

from ..logging_utils import get_logger
from .core import Caption
from .fonts import FontMetricsProvider
from .placement import NUM_PLACEMENTS, Placement, jitter, resolve_placement
from .style_config import ComicLayoutConfig
from .utils import Rectangle, new_canvas

logger = get_logger(__name__)

class PanelTextRenderer:
    """Renders one caption into its own panel-sized transparent canvas."""

    def __init__(self, fonts: FontMetricsProvider, layout: ComicLayoutConfig = None,
                 derive_placement: bool = True):
        """Initialize the panel renderer.

        Args:
            fonts: Font used for both measuring and drawing
            layout: ComicLayoutConfig instance or None for defaults
            derive_placement: If True, captions without a placement get a slot
                and jitter derived from their text. If False, they use the
                layout's default placement and no jitter.
        """
        self.fonts = fonts
        self.layout = layout or ComicLayoutConfig()
        self.derive_placement = derive_placement
        logger.debug(f"PanelTextRenderer initialized (derive_placement={derive_placement})")

    def baseline_point_for_placement(self, placement: Placement) -> Tuple[int, int]:
        """Canonical baseline anchor for a slot.

        The panel height is split into equal bands and the anchor sits in the
        vertical middle of the band, which keeps text away from panel edges.

        Raises:
            ValueError: If ``placement`` is NONE
        """
        placement = Placement(placement)
        if placement is Placement.NONE:
            raise ValueError("placement must be resolved before computing a baseline")
        segment_size = self.layout.panel_height // NUM_PLACEMENTS
        baseline_y = (placement - 1) * segment_size + segment_size // 2
        return self.layout.baseline_x, baseline_y

    def text_start_point(self, caption: Caption) -> Tuple[Placement, Tuple[int, int]]:
        """Resolve the caption's slot and return it with the jittered baseline point."""
        if self.derive_placement:
            placement = resolve_placement(caption.placement, caption.text)
            dx, dy = jitter(caption.text)
        else:
            placement = caption.placement
            if placement is Placement.NONE:
                placement = Placement(self.layout.default_placement)
            dx, dy = 0, 0

        base_x, base_y = self.baseline_point_for_placement(placement)
        return placement, (base_x + dx, base_y + dy)

    def text_background_rect(self, text: str, start_point: Tuple[int, int]) -> Rectangle:
        """Padded box covering the text drawn with its baseline at ``start_point``.

        Top edge is the baseline raised by the font ascent, right edge is the
        baseline start plus the measured advance.
        """
        x, y = start_point
        size = self.layout.font_size
        text_rect = Rectangle(
            x,
            y - self.fonts.ascent(size),
            x + self.fonts.advance_width(text, size),
            y,
        )
        return text_rect.with_padding(self.layout.text_padding)

    def render_panel(self, caption: Caption) -> Image.Image:
        """Render a caption's background box and text into a new panel canvas.

        Text wider than the panel is neither wrapped nor shrunk; anything past
        the panel edge is cut by the canvas bounds.

        Args:
            caption: Caption with non-empty text

        Returns:
            PIL.Image.Image: Panel-sized RGBA canvas, transparent outside the box

        Raises:
            ValueError: If the caption text is empty
        """
        if caption.is_empty:
            raise ValueError("cannot render an empty caption")

        panel = self.layout.panel_rectangle
        canvas = new_canvas(panel.width, panel.height)

        placement, start_point = self.text_start_point(caption)
        border_rect = self.text_background_rect(caption.text, start_point)

        logger.trace(
            f"[PANEL] '{caption.text[:30]}' | placement={placement.name} | "
            f"baseline={start_point} | box={tuple(border_rect)}"
        )

        draw = ImageDraw.Draw(canvas)
        if not border_rect.is_empty():
            # PIL rectangles include their end point, ours exclude it
            draw.rectangle(
                (border_rect.x0, border_rect.y0, border_rect.x1 - 1, border_rect.y1 - 1),
                fill=self.layout.box_color,
            )

        draw.text(
            start_point,
            caption.text,
            font=self.fonts.face(self.layout.font_size),
            fill=self.layout.text_color,
            anchor='ls',
        )
        return canvas
