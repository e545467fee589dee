"""
atwgen Comic Overlay Module

This module composes the three-panel comic. It is split into small components:

- style_config.py: Layout dataclass (panel slot table, font size, padding)
- placement.py: Deterministic slot and jitter derivation from caption text
- fonts.py: Font loading and ascent/advance measurement
- renderer.py: Per-panel caption rendering with a padded background box
- compositor.py: Background scaling, cropping and masked blending
- overlay.py: Scene assembly that stamps panels into their slots
- image_io.py: Decoding inputs and encoding the output PNG
- __init__.py: ComicOverlay facade tying the pipeline together

Usage:
    from atwgen.comic_overlay import ComicOverlay, Caption

    overlay = ComicOverlay(font_path="Loveletter_TW.ttf")
    scene = overlay.render(template, mask, background, [Caption("foo"), Caption(""), Caption("baz")])
"""
from typing import Optional, Sequence

from PIL import Image

from ..errors import ConfigError
from ..logging_utils import get_logger
from .compositor import BackgroundCompositor
from .core import Caption, CaptionLike, to_captions
from .fonts import FontMetricsProvider
from .image_io import ComicAssets, load_image, load_mask, write_png
from .overlay import SceneAssembler, check_caption_count
from .placement import Placement
from .renderer import PanelTextRenderer
from .style_config import ComicLayoutConfig

logger = get_logger(__name__)

class ComicOverlay:
    """Facade over the compositor, renderer and assembler.

    The font is loaded lazily, only once a render actually has caption text.
    """

    def __init__(self, layout: Optional[ComicLayoutConfig] = None, font_path: Optional[str] = None,
                 fonts: Optional[FontMetricsProvider] = None, derive_placement: bool = True):
        """Initialize the comic overlay.

        Args:
            layout: ComicLayoutConfig instance or None for defaults
            font_path: Font file loaded on first use
            fonts: Already loaded FontMetricsProvider (takes precedence over font_path)
            derive_placement: Derive slot and jitter from caption text when no
                placement is given
        """
        self.layout = layout or ComicLayoutConfig()
        self.font_path = font_path
        self.derive_placement = derive_placement
        self.compositor = BackgroundCompositor(self.layout)
        self._fonts = fonts
        self._assembler = None

    @property
    def fonts(self) -> FontMetricsProvider:
        if self._fonts is None:
            if self.font_path is None:
                raise ConfigError("no font configured for caption rendering")
            self._fonts = FontMetricsProvider.from_path(self.font_path)
        return self._fonts

    @property
    def assembler(self) -> SceneAssembler:
        if self._assembler is None:
            renderer = PanelTextRenderer(self.fonts, self.layout, self.derive_placement)
            self._assembler = SceneAssembler(renderer, self.layout)
        return self._assembler

    def render(self, template: Image.Image, mask: Image.Image, background: Image.Image,
               captions: Sequence[CaptionLike],
               background_placement: Placement = Placement.NONE) -> Image.Image:
        """Composite the background and write the captions.

        Args:
            template: Base panel artwork
            mask: Mask selecting where the background shows through
            background: Background photo
            captions: Up to one caption (or plain string) per panel
            background_placement: Band of the background to crop from

        Returns:
            PIL.Image.Image: Finished RGBA scene

        Raises:
            UsageError: If there are more captions than panels
            AssetLoadError: If the font or mask is unusable
        """
        captions = to_captions(captions)
        # fail on too many captions before any drawing happens
        check_caption_count(captions, self.layout)

        scene = self.compositor.composite(template, mask, background, background_placement)
        if all(caption.is_empty for caption in captions):
            logger.debug("No caption text, skipping text rendering")
            return scene
        return self.assembler.assemble(scene, captions)

    def render_files(self, assets: ComicAssets, captions: Sequence[CaptionLike],
                     background_placement: Placement = Placement.NONE) -> Image.Image:
        """Load the assets from disk, render, and write the output PNG."""
        captions = to_captions(captions)
        check_caption_count(captions, self.layout)

        template = load_image(assets.template, "template")
        mask = load_mask(assets.mask)
        background = load_image(assets.background, "background")
        if self._fonts is None and self.font_path is None:
            self.font_path = assets.font

        scene = self.render(template, mask, background, captions, background_placement)
        write_png(assets.output, scene)
        return scene


__all__ = [
    'BackgroundCompositor',
    'Caption',
    'ComicAssets',
    'ComicLayoutConfig',
    'ComicOverlay',
    'FontMetricsProvider',
    'PanelTextRenderer',
    'Placement',
    'SceneAssembler',
]
