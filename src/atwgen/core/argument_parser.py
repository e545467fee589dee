"""Command-line argument parsing for atwgen."""
import argparse
from typing import List, Optional

from ..comic_overlay.image_io import (
    DEFAULT_FONT, DEFAULT_MASK, DEFAULT_OUTPUT, DEFAULT_TEMPLATE
)

LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_CONFIG = "config.json"

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list, or None to use sys.argv

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(description="atwgen - three-panel comic generator")

    # Fixed caption list, one per panel in order
    parser.add_argument("captions", nargs="*", help="Caption text for each panel (use \"\" to leave a panel empty)")

    parser.add_argument("--config", "-c", default=None,
                       help=f"JSON config with panels and background (default: {DEFAULT_CONFIG})")
    parser.add_argument("--captions-file", default=None, help="Text file with one caption per line")

    # Asset paths
    parser.add_argument("--template", default=DEFAULT_TEMPLATE, help="Base template image")
    parser.add_argument("--mask", default=DEFAULT_MASK, help="Template mask image")
    parser.add_argument("--background", "-b", default=None, help="Background image (overrides the config)")
    parser.add_argument("--font", default=DEFAULT_FONT, help="TrueType/OpenType font file")
    parser.add_argument("--output", "-o", default=DEFAULT_OUTPUT, help="Output PNG path")

    parser.add_argument("--background-placement", type=int, choices=range(1, 6), default=None,
                       help="Background band to start the crop at, 1 (top) to 5 (bottom)")

    # Placement mode
    parser.add_argument("--explicit-placement", action="store_true",
                       help="Do not derive slot and jitter from caption text")

    # Logging
    parser.add_argument("--log-level", "-l", default="INFO", type=str.upper, choices=LOG_LEVELS,
                       help="Logging level")
    parser.add_argument("--log-file", default=None, help="Optional log file path")

    return parser.parse_args(argv)
