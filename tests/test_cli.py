"""
Tests for the command-line interface.
"""

import contextlib
import io
import json
import logging
import os
import tempfile
import unittest
from unittest import mock

from fakes import CIRCLE_SVG, FakeBackend

from svg_studio import cli
from svg_studio.config import DEFAULT_SVG
from svg_studio.core.renderer import SVGRasterizer


class TestCLI(unittest.TestCase):
    """Tests for the svg-studio entry point."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = self.temp_dir.name
        self.root_handlers = logging.getLogger().handlers[:]
        self.root_level = logging.getLogger().level

    def tearDown(self):
        """Clean up after tests."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in self.root_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(self.root_level)
        self.temp_dir.cleanup()

    def write(self, name, content):
        path = os.path.join(self.root, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def run_cli(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(io.StringIO()):
            code = cli.main(list(argv))
        return code, out.getvalue().splitlines()

    def test_new(self):
        path = os.path.join(self.root, "design.svg")
        code, _ = self.run_cli("new", path)

        self.assertEqual(code, 0)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), DEFAULT_SVG)

    def test_validate_valid(self):
        path = self.write("ok.svg", CIRCLE_SVG)
        code, lines = self.run_cli("validate", path)

        self.assertEqual(code, 0)
        self.assertEqual(lines, ["No problems have been detected in the workspace.", "0 errors, 0 warnings"])

    def test_validate_successive_edits(self):
        """History keeps the earlier error; exit code follows the last file."""
        bad = self.write("bad.svg", "<svg><rect></svg>")
        good = self.write("good.svg", CIRCLE_SVG)

        code, lines = self.run_cli("validate", bad, good)
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["Syntax Error: mismatched tag", "1 errors, 0 warnings"])

        code, _ = self.run_cli("validate", good, bad)
        self.assertEqual(code, 1)

    def test_validate_missing_file(self):
        code, _ = self.run_cli("validate", os.path.join(self.root, "missing.svg"))
        self.assertEqual(code, 2)

    def test_export_eps(self):
        path = self.write("design.svg", CIRCLE_SVG)
        out_dir = os.path.join(self.root, "out")

        code, lines = self.run_cli("export", path, "--format", "eps", "--output-dir", out_dir)

        self.assertEqual(code, 0)
        with open(os.path.join(out_dir, "design.eps"), "rb") as f:
            self.assertEqual(f.read(), CIRCLE_SVG.encode("utf-8"))
        self.assertEqual(len(lines), 1)
        self.assertIn("Exported as EPS", lines[0])

    def test_export_all_with_config(self):
        path = self.write("design.svg", CIRCLE_SVG)
        config = self.write("config.json", json.dumps({"base_filename": "poster"}))
        out_dir = os.path.join(self.root, "out")

        with mock.patch.object(cli, "EditorSession", side_effect=self.fake_session):
            code, _ = self.run_cli("--config", config, "export", path, "--format", "all", "--output-dir", out_dir)

        self.assertEqual(code, 0)
        self.assertEqual(sorted(os.listdir(out_dir)), ["poster.eps", "poster.pdf"])

    def test_export_pdf_failure(self):
        path = self.write("design.svg", "<svg>")
        out_dir = os.path.join(self.root, "out")

        with mock.patch.object(cli, "EditorSession", side_effect=self.failing_session):
            code, lines = self.run_cli("export", path, "--output-dir", out_dir)

        self.assertEqual(code, 1)
        self.assertFalse(os.path.exists(os.path.join(out_dir, "design.pdf")))
        self.assertIn("Failed to render SVG for PDF export. Check syntax.", lines[0])

    def test_bad_config(self):
        path = self.write("design.svg", CIRCLE_SVG)
        config = self.write("config.json", json.dumps({"colour": "red"}))

        code, _ = self.run_cli("--config", config, "validate", path)
        self.assertEqual(code, 2)

    def test_bad_config_values(self):
        """Invalid values exit with code 2 instead of a traceback."""
        path = self.write("design.svg", CIRCLE_SVG)
        for values in ({"pdf_page_size": "B7"}, {"pdf_image_offset": 10}):
            with self.subTest(values=values):
                config = self.write("config.json", json.dumps(values))
                code, _ = self.run_cli("--config", config, "export", path, "--format", "eps",
                                       "--output-dir", os.path.join(self.root, "out"))
                self.assertEqual(code, 2)

    @staticmethod
    def fake_session(document, config=None):
        from svg_studio.session import EditorSession
        return EditorSession(document, config=config, rasterizer=SVGRasterizer(backend=FakeBackend()))

    @staticmethod
    def failing_session(document, config=None):
        from svg_studio.session import EditorSession
        return EditorSession(document, config=config, rasterizer=SVGRasterizer(backend=FakeBackend(fail=True)))


if __name__ == "__main__":
    unittest.main()
