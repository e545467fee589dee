"""Application initialization for atwgen: logging, captions and render settings."""
from dataclasses import dataclass, field
from typing import List

from ..comic_overlay import ComicOverlay
from ..comic_overlay.core import Caption
from ..comic_overlay.image_io import DEFAULT_BACKGROUND, ComicAssets
from ..comic_overlay.overlay import check_caption_count
from ..comic_overlay.placement import Placement
from ..comic_overlay.style_config import ComicLayoutConfig
from ..logging_utils import get_logger, setup_logging
from .argument_parser import DEFAULT_CONFIG
from .config_loader import ComicConfig, load_captions_file, load_config

logger = get_logger(__name__)

@dataclass
class RenderJob:
    """Everything one run needs, resolved from the CLI and config."""
    assets: ComicAssets
    captions: List[Caption] = field(default_factory=list)
    background_placement: Placement = Placement.TOP_MIDDLE
    layout: ComicLayoutConfig = field(default_factory=ComicLayoutConfig)
    derive_placement: bool = True

    def create_overlay(self) -> ComicOverlay:
        return ComicOverlay(
            layout=self.layout,
            font_path=self.assets.font,
            derive_placement=self.derive_placement,
        )

def resolve_captions(args, config: ComicConfig) -> List[Caption]:
    """Pick the caption source: CLI list, then caption file, then config.

    Args:
        args: Parsed command line arguments
        config: Loaded config (possibly empty)

    Returns:
        list: Captions in panel order
    """
    if args.captions:
        logger.debug(f"Using {len(args.captions)} captions from the command line")
        return [Caption(text=text) for text in args.captions]
    if args.captions_file:
        return load_captions_file(args.captions_file)
    return list(config.captions)

def initialize_app(args) -> RenderJob:
    """Set up logging and build the render job.

    Args:
        args: Parsed command line arguments

    Returns:
        RenderJob: Resolved assets, captions and settings

    Raises:
        ConfigError: If the config or caption file cannot be used
        UsageError: If more captions were given than there are panels
    """
    setup_logging(args.log_level, args.log_file)

    # The config file is only required when nothing else supplies captions
    if args.config or not (args.captions or args.captions_file):
        config = load_config(args.config or DEFAULT_CONFIG)
    else:
        config = ComicConfig()

    captions = resolve_captions(args, config)
    layout = ComicLayoutConfig()
    check_caption_count(captions, layout)

    if args.background_placement is not None:
        background_placement = Placement(args.background_placement)
    else:
        background_placement = config.background_placement

    assets = ComicAssets(
        template=args.template,
        mask=args.mask,
        background=args.background or config.background_path or DEFAULT_BACKGROUND,
        font=args.font,
        output=args.output,
    )

    logger.info(f"Rendering {len(captions)} captions onto {assets.template} -> {assets.output}")
    for index, caption in enumerate(captions):
        logger.debug(f"  Panel {index}: '{caption.text}' ({caption.placement.name})")

    return RenderJob(
        assets=assets,
        captions=captions,
        background_placement=background_placement,
        layout=layout,
        derive_placement=not args.explicit_placement,
    )
