"""Scene assembly: stamp each rendered panel into its slot on the scene."""
from typing import Sequence

from PIL import Image

from ..errors import UsageError
from ..logging_utils import get_logger
from .core import Caption
from .renderer import PanelTextRenderer
from .style_config import ComicLayoutConfig
from .utils import copy_image

logger = get_logger(__name__)

def check_caption_count(captions: Sequence[Caption], layout: ComicLayoutConfig) -> None:
    """Reject more captions than there are panels.

    Raises:
        UsageError: If ``captions`` does not fit the panel slot table
    """
    if len(captions) > layout.panel_count:
        raise UsageError(
            f"{len(captions)} captions supplied but the layout only has "
            f"{layout.panel_count} panels"
        )

class SceneAssembler:
    """Orchestrates per-panel rendering on top of a composited background."""

    def __init__(self, renderer: PanelTextRenderer, layout: ComicLayoutConfig = None):
        """Initialize the scene assembler.

        Args:
            renderer: PanelTextRenderer used for each non-empty caption
            layout: ComicLayoutConfig instance or None to reuse the renderer's
        """
        self.renderer = renderer
        self.layout = layout or renderer.layout
        logger.debug("SceneAssembler initialized")

    def assemble(self, scene: Image.Image, captions: Sequence[Caption]) -> Image.Image:
        """Write every non-empty caption into its panel on a copy of ``scene``.

        Args:
            scene: Composited background scene
            captions: Captions in panel order, at most one per panel

        Returns:
            PIL.Image.Image: New RGBA scene with the captions drawn

        Raises:
            UsageError: If there are more captions than panels
        """
        check_caption_count(captions, self.layout)

        result = copy_image(scene)
        rendered_count = 0

        for index, caption in enumerate(captions):
            # an empty caption would still draw a padded box, so skip the panel
            if caption.is_empty:
                logger.trace(f"[SCENE] Panel {index} has no caption, leaving background visible")
                continue

            slot = self.layout.panel_slot(index)
            panel_image = self.renderer.render_panel(caption)
            result.alpha_composite(panel_image, dest=slot.top_left)
            rendered_count += 1

        logger.debug(f"[SCENE] Rendered {rendered_count}/{len(captions)} captions")
        return result
