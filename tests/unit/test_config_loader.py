"""Unit tests for config.json and caption-file loading."""
import pytest

from atwgen.comic_overlay.core import Caption
from atwgen.comic_overlay.placement import Placement
from atwgen.core.config_loader import (
    ComicConfig, load_captions_file, load_config, parse_background_placement,
    parse_config, parse_panel_placement
)
from atwgen.errors import ConfigError


class TestParseConfig:

    def test_full_config(self):
        config = parse_config({
            "panels": [
                {"text": "foo", "placement": "top"},
                {"text": "", "placement": ""},
                {"text": "baz", "placement": "bottom-middle"},
            ],
            "background": {"path": "photo.jpg", "placement": 4},
        })
        assert config.captions == [
            Caption("foo", Placement.TOP),
            Caption("", Placement.NONE),
            Caption("baz", Placement.BOTTOM_MIDDLE),
        ]
        assert config.background_path == "photo.jpg"
        assert config.background_placement is Placement.BOTTOM_MIDDLE

    def test_defaults(self):
        config = parse_config({})
        assert config == ComicConfig()
        assert config.background_path == "background"
        assert config.background_placement is Placement.TOP_MIDDLE

    def test_missing_placement_and_text(self):
        config = parse_config({"panels": [{"text": "foo"}, {}]})
        assert config.captions == [Caption("foo"), Caption("")]

    @pytest.mark.parametrize("data, message", [
        ([], "JSON object"),
        ({"panels": {"text": "foo"}}, "must be a list"),
        ({"panels": ["foo"]}, "Panel 0 must be an object"),
        ({"panels": [{"text": 5}]}, "text must be a string"),
        ({"background": "photo.jpg"}, "must be an object"),
        ({"background": {"path": 3}}, "path must be a string"),
        ({"background": {"placement": 9}}, "between 1 and 5"),
    ])
    def test_malformed_config(self, data, message):
        with pytest.raises(ConfigError, match=message):
            parse_config(data)


class TestPlacementParsing:

    def test_unknown_panel_placement_is_auto(self):
        assert parse_panel_placement("diagonal") is Placement.NONE
        assert parse_panel_placement(None) is Placement.NONE

    @pytest.mark.parametrize("value", [3, 2.5, True, ["top"], {"name": "top"}])
    def test_non_string_panel_placement_rejected(self, value):
        with pytest.raises(ConfigError, match="must be a string"):
            parse_panel_placement(value)

    def test_non_string_panel_placement_fails_config(self):
        with pytest.raises(ConfigError):
            parse_config({"panels": [{"text": "foo", "placement": 3}]})

    def test_known_panel_placement(self):
        assert parse_panel_placement("middle") is Placement.MIDDLE

    @pytest.mark.parametrize("value, expected", [
        (None, Placement.TOP_MIDDLE),
        ("", Placement.TOP_MIDDLE),
        (1, Placement.TOP),
        (5, Placement.BOTTOM),
        ("3", Placement.MIDDLE),
        ("bottom", Placement.BOTTOM),
    ])
    def test_background_placement(self, value, expected):
        assert parse_background_placement(value) is expected

    @pytest.mark.parametrize("value", [0, 6, -1, True, "sideways", 2.5])
    def test_invalid_background_placement(self, value):
        with pytest.raises(ConfigError):
            parse_background_placement(value)


class TestLoadConfig:

    def test_load_from_file(self, write_config):
        path = write_config({"panels": [{"text": "héllo", "placement": "bottom"}]})
        config = load_config(path)
        assert config.captions == [Caption("héllo", Placement.BOTTOM)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "config.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{panels: [", encoding='utf-8')
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(str(path))


class TestCaptionsFile:

    def test_one_caption_per_line(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes(b"foo\n\nbaz\n")
        assert load_captions_file(str(path)) == [Caption("foo"), Caption(""), Caption("baz")]

    def test_caption_text_is_kept_verbatim(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes("foo \nbar\u2028baz\n".encode('utf-8'))
        assert load_captions_file(str(path)) == [Caption("foo "), Caption("bar\u2028baz")]

    def test_only_line_feeds_split_captions(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes(b"a\x0bb\x0cc\x1cd")
        assert load_captions_file(str(path)) == [Caption("a\x0bb\x0cc\x1cd")]

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes(b"foo\r\n\r\nbaz\r\r\n")
        assert load_captions_file(str(path)) == [Caption("foo"), Caption(""), Caption("baz\r")]

    def test_last_line_without_newline(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes(b"foo\nbaz")
        assert load_captions_file(str(path)) == [Caption("foo"), Caption("baz")]

    def test_empty_file_has_no_captions(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes(b"")
        assert load_captions_file(str(path)) == []

    def test_missing_captions_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_captions_file(str(tmp_path / "nope.txt"))

    def test_undecodable_captions_file(self, tmp_path):
        path = tmp_path / "captions.txt"
        path.write_bytes(b"\xff\xfe\xfa broken")
        with pytest.raises(ConfigError):
            load_captions_file(str(path))
