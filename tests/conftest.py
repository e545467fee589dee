"""Shared test configuration and fixtures for the atwgen test suite."""

import json
import logging
import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image, ImageFont

# Add src directory to Python path for all tests
src_path = str(Path(__file__).parent.parent / 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from atwgen.comic_overlay.fonts import FontMetricsProvider
from atwgen.comic_overlay.style_config import ComicLayoutConfig

TEMPLATE_COLOR = (90, 140, 200, 255)


@pytest.fixture(scope="session")
def font_bytes():
    """Bytes of the scalable font bundled with Pillow."""
    font = ImageFont.load_default(size=14)
    data = getattr(font, 'font_bytes', None)
    if not data:
        pytest.skip("Pillow was built without FreeType; no scalable default font available")
    return data


@pytest.fixture(scope="session")
def font_path(font_bytes, tmp_path_factory):
    """The bundled font written out as a .ttf file."""
    path = tmp_path_factory.mktemp("fonts") / "test_font.ttf"
    path.write_bytes(font_bytes)
    return str(path)


@pytest.fixture
def fonts(font_path):
    """Font metrics provider loaded from the test font."""
    return FontMetricsProvider.from_path(font_path)


@pytest.fixture
def layout():
    """Default three-panel layout."""
    return ComicLayoutConfig()


def make_template(layout):
    """Opaque single-colour template the size of the comic."""
    return Image.new('RGBA', layout.comic_size, TEMPLATE_COLOR)


def make_mask(layout):
    """Grayscale mask that lets the background through inside the panels only."""
    mask = Image.new('L', layout.comic_size, 0)
    for slot in layout.panel_slots:
        mask.paste(255, slot.box)
    return mask


def make_background(width=720, height=600):
    """Background whose colour encodes the source row: (row % 256, row // 256 * 60, 30)."""
    rows = np.arange(height, dtype=np.int64)
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[:, :, 0] = (rows % 256)[:, None]
    pixels[:, :, 1] = (rows // 256 * 60)[:, None]
    pixels[:, :, 2] = 30
    return Image.fromarray(pixels, 'RGB')


@pytest.fixture
def template(layout):
    return make_template(layout)


@pytest.fixture
def mask(layout):
    return make_mask(layout)


@pytest.fixture
def background():
    return make_background()


@pytest.fixture
def asset_dir(tmp_path, layout, font_bytes):
    """Directory with template.png, template_mask.png, background and a font."""
    make_template(layout).save(tmp_path / "template.png")
    make_mask(layout).save(tmp_path / "template_mask.png")
    # no extension, like the default background name
    make_background().save(tmp_path / "background", format='PNG')
    (tmp_path / "Loveletter_TW.ttf").write_bytes(font_bytes)
    return tmp_path


@pytest.fixture
def write_config(asset_dir):
    """Write a config.json into the asset directory and return its path."""
    def _write(data, name="config.json"):
        path = asset_dir / name
        path.write_text(json.dumps(data), encoding='utf-8')
        return str(path)
    return _write


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# Test collection configuration
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def cleanup_logging_handlers():
    """Drop handlers installed by setup_logging so they don't outlive pytest's capture streams."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, '_atwgen_handler', False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.WARNING)
