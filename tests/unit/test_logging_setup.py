import json
import logging
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "render"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from termpix_core.logging_setup import JsonFormatter
from termpix_render import ColorMode, ColorTier, HalfBlockRenderer, PixelBuffer, VerticalAlignment


class JsonFormatterTests(unittest.TestCase):
    def test_payload_fields(self):
        record = logging.LogRecord("termpix.render", logging.INFO, __file__, 1, "built %s script", ("auto",), None)
        record.event = "script_built"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "termpix.render")
        self.assertEqual(payload["msg"], "built auto script")
        self.assertEqual(payload["event"], "script_built")
        self.assertIn("ts_utc", payload)

    def test_exception_is_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("termpix", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        self.assertIn("ValueError: boom", payload["exc"])
        self.assertNotIn("event", payload)

    def test_render_records_carry_render_fields(self):
        buffer = PixelBuffer.from_pixels([[(255, 0, 0, 255), (0, 0, 0, 0)]])
        renderer = HalfBlockRenderer(VerticalAlignment.PAD_BOTTOM)
        with self.assertLogs("termpix.render", level="DEBUG") as logs:
            renderer.script(buffer, ColorMode.AUTO)

        payloads = [json.loads(JsonFormatter().format(r)) for r in logs.records]
        variants = [p for p in payloads if p["event"] == "variant_rendered"]
        self.assertEqual([p["tier"] for p in variants], [t.value for t in ColorTier])
        self.assertTrue(all(p["alignment"] == "bottom" for p in variants))
        self.assertTrue(all(p["elapsed_ms"] >= 0 for p in variants))

        built = payloads[-1]
        self.assertEqual(built["event"], "script_built")
        self.assertEqual(built["color_mode"], "auto")
        self.assertEqual((built["width"], built["height"]), (2, 1))


if __name__ == "__main__":
    unittest.main()
