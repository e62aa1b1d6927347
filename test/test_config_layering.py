"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MrmReader.cli.ui import build_overrides
from MrmReader.config import load_config, parse_config_dict
from MrmReader.core.models import BOX_FRAME, CLASSIC_FRAME


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "search": {
            "journal_issn": "1522-2594",
            "journal_name": "Magnetic Resonance in Medicine",
            "max_results": 10,
            "timeout": 30,
            "query": "",
        },
        "display": {"width": 100, "title_only": False, "color": True, "frame": "classic"},
        "output": {"formats": ["console"], "base_dir": "output"},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.search.journal_issn, "1522-2594")
        self.assertEqual(cfg.search.timeout, 30.0)
        self.assertEqual(cfg.display.width, 100)
        self.assertEqual(cfg.output.formats, ("console",))

    def test_packaged_defaults(self) -> None:
        cfg = load_config()
        self.assertEqual(cfg.search.max_results, 10)
        self.assertEqual(cfg.search.query, "")
        options = cfg.display.to_options()
        self.assertEqual(options.display_width, 100)
        self.assertFalse(options.title_only)
        self.assertTrue(options.palette.enabled)
        self.assertEqual(options.frame, CLASSIC_FRAME)

    def test_file_is_merged_over_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "custom.yml"
            path.write_text("search:\n  max_results: 3\ndisplay:\n  frame: box\n", encoding="utf-8")
            cfg = load_config(path)
        self.assertEqual(cfg.search.max_results, 3)
        self.assertEqual(cfg.search.journal_issn, "1522-2594")
        self.assertEqual(cfg.display.to_options().frame, BOX_FRAME)

    def test_overrides_win_over_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "custom.yml"
            path.write_text("search:\n  max_results: 3\n", encoding="utf-8")
            cfg = load_config(path, overrides=build_overrides(num=7, term="diffusion", title_only=True))
        self.assertEqual(cfg.search.max_results, 7)
        self.assertEqual(cfg.search.query, "diffusion")
        self.assertTrue(cfg.display.title_only)

    def test_build_overrides_only_includes_given_flags(self) -> None:
        self.assertEqual(build_overrides(), {})
        self.assertEqual(build_overrides(no_color=True), {"display": {"color": False}})
        self.assertEqual(
            build_overrides(output_dir=Path("out")),
            {"output": {"base_dir": "out"}},
        )

    def test_invalid_issn_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["journal_issn"] = "MRM"
        with self.assertRaisesRegex(ValueError, "search\\.journal_issn"):
            parse_config_dict(raw)

    def test_issn_is_normalized(self) -> None:
        raw = _base_raw_config()
        raw["search"]["journal_issn"] = " 0740-319x "
        self.assertEqual(parse_config_dict(raw).search.journal_issn, "0740-319X")

    def test_max_results_bounds(self) -> None:
        for value in (0, 1001):
            with self.subTest(value=value):
                raw = _base_raw_config()
                raw["search"]["max_results"] = value
                with self.assertRaisesRegex(ValueError, "search\\.max_results"):
                    parse_config_dict(raw)

    def test_max_results_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["max_results"] = "10"
        with self.assertRaisesRegex(TypeError, "search\\.max_results"):
            parse_config_dict(raw)

    def test_width_too_small(self) -> None:
        raw = _base_raw_config()
        raw["display"]["width"] = 10
        with self.assertRaisesRegex(ValueError, "display\\.width"):
            parse_config_dict(raw)

    def test_unknown_frame(self) -> None:
        raw = _base_raw_config()
        raw["display"]["frame"] = "double"
        with self.assertRaisesRegex(ValueError, "display\\.frame"):
            parse_config_dict(raw)

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", "json"]
        with self.assertRaisesRegex(ValueError, "output\\.formats"):
            parse_config_dict(raw)

    def test_missing_section(self) -> None:
        raw = deepcopy(_base_raw_config())
        del raw["display"]
        with self.assertRaisesRegex(ValueError, "display"):
            parse_config_dict(raw)

    def test_log_level_validation(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "verbose"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)


if __name__ == "__main__":
    unittest.main()
