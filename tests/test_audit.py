import json
import tempfile
from pathlib import Path
import unittest

from plainlatin.audit import AuditLogger, build_fold_event, fold_event_to_json
from plainlatin.pipeline import fold_text
from plainlatin.types import Axis


class AuditEventTests(unittest.TestCase):
    def test_fold_event_schema(self) -> None:
        result = fold_text("straße", axis=Axis.UPPERCASE)
        event = build_fold_event(result, input_length=6, timestamp="2024-01-01T00:00:00+00:00")
        data = json.loads(fold_event_to_json(event))

        expected_keys = {
            "timestamp",
            "content_hash",
            "axis",
            "modified",
            "input_length",
            "output_length",
            "categories",
        }
        self.assertEqual(set(data.keys()), expected_keys)
        self.assertEqual(data["axis"], "uppercase")
        self.assertEqual(data["output_length"], 7)
        self.assertEqual(data["categories"], {"unknown": 5, "ligature": 1})
        self.assertNotIn("text", data)


class AuditLogWriterTests(unittest.TestCase):
    def test_audit_log_appends_jsonl(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "nested" / "audit.jsonl"
            logger = AuditLogger(log_path)
            result = fold_text("café")
            logger.log(result, input_length=4, timestamp="2024-01-01T00:00:00+00:00")
            logger.log(result, input_length=4, timestamp="2024-01-02T00:00:00+00:00")

            lines = log_path.read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 2)
            data = json.loads(lines[0])
            self.assertEqual(data["timestamp"], "2024-01-01T00:00:00+00:00")
            self.assertTrue(data["modified"])
            self.assertNotIn("text", data)
