"""
Tests for the editing session.
"""

import asyncio
import unittest

from fakes import CIRCLE_SVG, BlockingBackend, FakeBackend

from svg_studio.config import DEFAULT_SVG
from svg_studio.core.diagnostics_log import DiagnosticsLog
from svg_studio.core.renderer import SVGRasterizer
from svg_studio.errors import ConfigError
from svg_studio.models.diagnostic import Severity


def make_session(document=DEFAULT_SVG, backend=None, **kwargs):
    from svg_studio.session import EditorSession
    rasterizer = SVGRasterizer(backend=backend or FakeBackend())
    return EditorSession(document, rasterizer=rasterizer, **kwargs)


class TestEditorSession(unittest.TestCase):
    """Tests for validation through the EditorSession class."""

    def test_default_document_is_valid(self):
        session = make_session()

        self.assertEqual(session.document, DEFAULT_SVG)
        self.assertTrue(session.last_result.valid)
        self.assertEqual(session.problems(), [])

    def test_initial_document_is_validated(self):
        session = make_session("<svg>")

        self.assertFalse(session.last_result.valid)
        self.assertEqual(len(session.problems()), 1)

    def test_rapid_edits_logged_in_call_order(self):
        """Both passes run; the second edit's error is the newest entry."""
        session = make_session()

        first = session.update("<svg><rect/></svg>")
        second = session.update("<svg><rect></svg>")

        self.assertTrue(first.valid)
        self.assertFalse(second.valid)
        self.assertEqual(session.document, "<svg><rect></svg>")
        self.assertEqual(len(session.problems()), 1)
        self.assertEqual(session.terminal()[0].message, "Syntax Error: mismatched tag")

    def test_every_invalid_edit_is_recorded(self):
        """Repeated bad edits are not deduplicated."""
        session = make_session()
        for document in ["<svg>", "<svg><g>", "<svg><g></svg>"]:
            session.update(document)
        session.update(CIRCLE_SVG)

        self.assertEqual(len(session.problems()), 3)
        self.assertTrue(session.last_result.valid)

    def test_adopts_given_log(self):
        log = DiagnosticsLog()
        session = make_session(log=log)
        session.update("<svg>")

        self.assertIs(session.log, log)
        self.assertEqual(len(log), 1)

    def test_config_overrides(self):
        session = make_session(config={"base_filename": "logo", "pdf_image_offset": [5, 5]})

        self.assertEqual(session.eps_exporter.filename, "logo.eps")
        self.assertEqual(session.pdf_exporter.filename, "logo.pdf")
        self.assertEqual(session.pdf_exporter.image_offset, (5, 5))

    def test_unknown_config_key(self):
        with self.assertRaises(ConfigError):
            make_session(config={"colour": "blue"})

    def test_export_eps(self):
        session = make_session(CIRCLE_SVG)

        payload = session.export_eps()

        self.assertEqual(payload.data, CIRCLE_SVG.encode("utf-8"))
        self.assertEqual(session.terminal()[0].severity, Severity.INFO)


class TestEditorSessionExport(unittest.IsolatedAsyncioTestCase):
    """Tests for PDF export through the EditorSession class."""

    async def test_export_pdf(self):
        session = make_session(CIRCLE_SVG)

        result = await session.export_pdf()

        self.assertTrue(result.ok)
        self.assertEqual(result.payload.filename, "design.pdf")
        self.assertEqual(session.terminal()[0].severity, Severity.SUCCESS)

    async def test_export_failure_leaves_editing_usable(self):
        session = make_session(CIRCLE_SVG, backend=FakeBackend(fail=True))

        result = await session.export_pdf()
        self.assertFalse(result.ok)

        self.assertTrue(session.update(DEFAULT_SVG).valid)
        self.assertEqual(len(session.problems()), 1)

    async def test_scheduled_export_uses_snapshot_at_call_time(self):
        """Edits made while a decode is pending do not change that export."""
        backend = BlockingBackend()
        session = make_session(CIRCLE_SVG, backend=backend)

        task = session.schedule_pdf_export()
        await asyncio.sleep(0)
        session.update("<svg><rect></svg>")
        backend.release()
        result = await task

        self.assertTrue(result.ok)
        self.assertEqual(backend.calls, [CIRCLE_SVG.encode("utf-8")])
        messages = [d.message for d in session.terminal()]
        self.assertEqual(messages, ["Successfully exported to PDF", "Syntax Error: mismatched tag"])

    async def test_scheduled_export_can_be_cancelled(self):
        backend = BlockingBackend()
        session = make_session(CIRCLE_SVG, backend=backend)

        task = session.schedule_pdf_export()
        await asyncio.sleep(0)
        task.cancel()
        backend.release()

        with self.assertRaises(asyncio.CancelledError):
            await task
        self.assertEqual(session.log.count(Severity.SUCCESS), 0)


if __name__ == "__main__":
    unittest.main()
