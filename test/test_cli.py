"""CLI tests with the Crossref HTTP call patched out."""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import requests
from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MrmReader.cli import cli

FETCH_PATH = "MrmReader.sources.crossref.client.CrossrefApiClient.fetch_journal_works"

ITEMS = [
    {
        "title": ["Smoke <scp>MRI</scp> Paper"],
        "URL": "https://doi.org/10.1002/mrm.99999",
        "abstract": "<jats:p>AbstractPurpose To test. Methods Mocked. Results Fine. Conclusion Done.</jats:p>",
        "published-online": {"date-parts": [[2024, 3, 15]]},
    }
]


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_prints_framed_paper(self) -> None:
        with patch(FETCH_PATH, return_value=ITEMS) as fetch:
            result = self.runner.invoke(cli, ["-n", "1", "--no-color"], catch_exceptions=False)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Smoke MRI Paper", result.output)
        self.assertIn("2024-03-15", result.output)
        self.assertIn("[Conclusion]:", result.output)
        query = fetch.call_args.args[0]
        self.assertEqual(query.rows, 1)
        self.assertIsNone(query.term)

    def test_title_only_and_search(self) -> None:
        with patch(FETCH_PATH, return_value=ITEMS) as fetch:
            result = self.runner.invoke(cli, ["-t", "-s", "diffusion"], catch_exceptions=False)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("Abstract:", result.output)
        query = fetch.call_args.args[0]
        self.assertEqual(query.term, "diffusion")
        self.assertFalse(query.include_abstract)

    def test_fetch_failure_exits_non_zero(self) -> None:
        with patch(FETCH_PATH, side_effect=requests.ConnectionError("network down")):
            result = self.runner.invoke(cli, [])
        self.assertNotEqual(result.exit_code, 0)

    def test_invalid_config_exits_with_message(self) -> None:
        with self.runner.isolated_filesystem():
            Path("bad.yml").write_text("display:\n  width: 5\n", encoding="utf-8")
            result = self.runner.invoke(cli, ["-c", "bad.yml"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid configuration", result.output)

    def test_output_dir_writes_plain_text(self) -> None:
        with self.runner.isolated_filesystem():
            with patch(FETCH_PATH, return_value=ITEMS):
                result = self.runner.invoke(cli, ["-o", "saved"], catch_exceptions=False)
            self.assertEqual(result.exit_code, 0, result.output)
            files = list(Path("saved").glob("mrm_*.txt"))
            self.assertEqual(len(files), 1)
            content = files[0].read_text(encoding="utf-8")
        self.assertIn("Smoke MRI Paper", content)
        self.assertNotIn("\x1b", content)
        self.assertTrue(content.startswith("┌"))

    def test_output_dir_keeps_configured_formats(self) -> None:
        with self.runner.isolated_filesystem():
            Path("text_only.yml").write_text("output:\n  formats: [text]\n", encoding="utf-8")
            with patch(FETCH_PATH, return_value=ITEMS):
                result = self.runner.invoke(cli, ["-c", "text_only.yml", "-o", "saved"], catch_exceptions=False)
            self.assertEqual(result.exit_code, 0, result.output)
            files = list(Path("saved").glob("mrm_*.txt"))
            self.assertEqual(len(files), 1)
        self.assertNotIn("Smoke MRI Paper", result.output)

    def test_output_failure_is_reported_as_run_failure(self) -> None:
        with self.runner.isolated_filesystem():
            Path("saved").write_text("not a directory", encoding="utf-8")
            with patch(FETCH_PATH, return_value=ITEMS), patch("MrmReader.cli.runner.log") as log:
                result = self.runner.invoke(cli, ["--no-color", "-o", "saved/sub"])
        self.assertNotEqual(result.exit_code, 0)
        message = log.error.call_args.args[0]
        self.assertTrue(message.startswith("Run failed"))

    def test_help_lists_short_options(self) -> None:
        result = self.runner.invoke(cli, ["-h"])
        self.assertEqual(result.exit_code, 0)
        for option in ("--num", "--title-only", "--search"):
            self.assertIn(option, result.output)


if __name__ == "__main__":
    unittest.main()
