"""Loading captions and background settings from config.json or a caption file."""
import json
from dataclasses import dataclass, field
from typing import List, Optional

from ..comic_overlay.core import Caption
from ..comic_overlay.image_io import DEFAULT_BACKGROUND
from ..comic_overlay.placement import CONCRETE_PLACEMENTS, Placement
from ..errors import ConfigError
from ..logging_utils import get_logger

logger = get_logger(__name__)

@dataclass
class ComicConfig:
    """Decoded contents of config.json."""
    captions: List[Caption] = field(default_factory=list)
    background_path: str = DEFAULT_BACKGROUND
    background_placement: Placement = Placement.TOP_MIDDLE

def parse_panel_placement(value) -> Placement:
    """Map a panel's placement string to a Placement.

    Missing, empty and unrecognized names all mean automatic placement.

    Raises:
        ConfigError: If the value is not a string
    """
    if value is None or value == "":
        return Placement.NONE
    if not isinstance(value, str):
        raise ConfigError(f"Panel placement must be a string, got {value!r}")
    placement = Placement.from_name(value)
    if placement is Placement.NONE:
        logger.warning(f"Unrecognized panel placement {value!r}, using automatic placement")
    return placement

def parse_background_placement(value) -> Placement:
    """Map the background placement (1..5 or a placement name) to a Placement.

    Raises:
        ConfigError: If the value is neither a slot number nor a known name
    """
    if value is None or value == "":
        return Placement.TOP_MIDDLE
    if isinstance(value, bool):
        raise ConfigError(f"Invalid background placement: {value!r}")
    if isinstance(value, int):
        if value not in {int(p) for p in CONCRETE_PLACEMENTS}:
            raise ConfigError(f"Background placement must be between 1 and 5, got {value}")
        return Placement(value)
    if isinstance(value, str):
        if value.strip().isdigit():
            return parse_background_placement(int(value.strip()))
        placement = Placement.from_name(value)
        if placement is not Placement.NONE:
            return placement
    raise ConfigError(f"Invalid background placement: {value!r}")

def parse_config(data) -> ComicConfig:
    """Validate decoded JSON and turn it into a ComicConfig.

    Raises:
        ConfigError: If the structure or field types are wrong
    """
    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object")

    panels = data.get("panels", [])
    if panels is None:
        panels = []
    if not isinstance(panels, list):
        raise ConfigError("'panels' must be a list")

    captions = []
    for index, panel in enumerate(panels):
        if not isinstance(panel, dict):
            raise ConfigError(f"Panel {index} must be an object")
        text = panel.get("text", "")
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise ConfigError(f"Panel {index} text must be a string")
        captions.append(Caption(text=text, placement=parse_panel_placement(panel.get("placement"))))

    background = data.get("background") or {}
    if not isinstance(background, dict):
        raise ConfigError("'background' must be an object")
    background_path = background.get("path") or DEFAULT_BACKGROUND
    if not isinstance(background_path, str):
        raise ConfigError("Background path must be a string")

    return ComicConfig(
        captions=captions,
        background_path=background_path,
        background_placement=parse_background_placement(background.get("placement")),
    )

def load_config(path: str) -> ComicConfig:
    """Read and validate a JSON config file.

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or is malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as config_file:
            data = json.load(config_file)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e

    config = parse_config(data)
    logger.info(
        f"Loaded config {path}: {len(config.captions)} panels, "
        f"background={config.background_path} ({config.background_placement.name})"
    )
    return config

def load_captions_file(path: str, encoding: Optional[str] = 'utf-8') -> List[Caption]:
    """Read one caption per line; blank lines become empty panels.

    Lines end at line feeds only and lose at most one trailing carriage
    return. Any other whitespace stays in the caption text.

    Raises:
        ConfigError: If the file cannot be read
    """
    try:
        with open(path, 'r', encoding=encoding, newline='') as captions_file:
            content = captions_file.read()
    except OSError as e:
        raise ConfigError(f"Unable to read caption file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Caption file {path} is not valid {encoding}: {e}") from e

    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    captions = [Caption(text=line[:-1] if line.endswith('\r') else line) for line in lines]
    logger.debug(f"Read {len(captions)} captions from {path}")
    return captions
