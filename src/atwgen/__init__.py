"""
atwgen - three-panel comic generator.

Layers a background photo under a cut-out template and writes one caption per
panel, placing each caption at a position derived from its own text.
"""

__version__ = "0.3.0"
