"""Error types raised by the comic generator.

Every failure is fatal for the run: components raise one of these and the
driver in ``atwgen.main`` is the only place that reports it and exits.
"""


class AtwgenError(Exception):
    """Base class for all generator failures."""


class ConfigError(AtwgenError):
    """Malformed or missing configuration (JSON config, caption file, CLI values)."""


class AssetLoadError(AtwgenError):
    """Missing or undecodable template, mask, background or font."""


class UsageError(AtwgenError):
    """More captions were supplied than the layout has panels."""


class EncodeError(AtwgenError):
    """The output image could not be written."""
