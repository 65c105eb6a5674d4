from __future__ import annotations

import io
import json
import shutil
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from export_audit.cli import main as export_audit_main
from export_audit.contracts import ExportAuditConfig
from export_audit.module import run_export_audit_relpath
from layout.artifacts import write_layout_json_artifact
from layout.config import PageGeometry
from layout.module import layout_document

A4_PT = PageGeometry().size_pt()
LETTER_PT = (612.0, 792.0)


class _FakeEngine:
    def __init__(self, sizes: list[tuple[float, float]]) -> None:
        self.sizes = sizes

    def backend_id(self) -> str:
        return "fake_backend"

    def backend_version(self) -> str | None:
        return "0"

    def get_page_sizes(self, *, pdf_file: Path) -> list[tuple[float, float]]:
        return list(self.sizes)


class _BrokenEngine(_FakeEngine):
    def get_page_sizes(self, *, pdf_file: Path) -> list[tuple[float, float]]:
        raise ValueError("not a pdf")


class TestExportAudit(unittest.TestCase):
    def setUp(self) -> None:
        repo_root = Path(__file__).resolve().parents[1]
        self.root = repo_root / "artifacts" / "_test_export_audit"
        if self.root.exists():
            shutil.rmtree(self.root)
        self.root.mkdir(parents=True, exist_ok=True)

        (self.root / "cv.pdf").write_bytes(b"%PDF-FAKE%")
        self.config = ExportAuditConfig(data_root=self.root)
        self.layout = layout_document({"personal": {"fullName": "Jane Doe"}, "skills": ["SQL"]})

    def _audit(self, engine: _FakeEngine, relpath: str = "cv.pdf"):
        with patch("export_audit.module._get_engine", return_value=engine):
            return run_export_audit_relpath(config=self.config, pdf_relpath=relpath, layout=self.layout)

    def test_matching_export_passes(self) -> None:
        r = self._audit(_FakeEngine([A4_PT]))
        self.assertTrue(r.ok)
        self.assertEqual(r.errors, [])
        self.assertEqual((r.expected_pages, r.page_count), (1, 1))
        self.assertEqual(r.meta["backend"], "fake_backend")

    def test_page_count_mismatch(self) -> None:
        r = self._audit(_FakeEngine([A4_PT, A4_PT]))
        self.assertFalse(r.ok)
        self.assertEqual([e.code for e in r.errors], ["EXPORT_PAGE_COUNT_MISMATCH"])
        self.assertEqual(r.errors[0].detail, {"expected_pages": 1, "page_count": 2})

    def test_page_size_mismatch_beyond_tolerance(self) -> None:
        near = (A4_PT[0] + 1.0, A4_PT[1] - 1.0)
        self.assertTrue(self._audit(_FakeEngine([near])).ok)

        r = self._audit(_FakeEngine([LETTER_PT]))
        self.assertEqual([e.code for e in r.errors], ["EXPORT_PAGE_SIZE_MISMATCH"])
        self.assertEqual(r.errors[0].detail["page_num"], 1)

    def test_input_errors_never_raise(self) -> None:
        engine = _FakeEngine([A4_PT])
        self.assertEqual(self._audit(engine, "cv.png").errors[0].code, "EXPORT_INPUT_NOT_PDF")
        self.assertEqual(self._audit(engine, "missing.pdf").errors[0].code, "EXPORT_INPUT_NOT_FOUND")
        self.assertEqual(self._audit(engine, "../escape.pdf").errors[0].code, "EXPORT_DATA_ACCESS_ERROR")
        self.assertEqual(self._audit(engine, "/abs/cv.pdf").errors[0].code, "EXPORT_DATA_ACCESS_ERROR")

        r = self._audit(_BrokenEngine([]))
        self.assertFalse(r.ok)
        self.assertEqual(r.page_count, 0)
        self.assertEqual(r.errors[0].code, "EXPORT_BACKEND_FAILED")

    def test_source_hash_recorded_on_request(self) -> None:
        cfg = ExportAuditConfig(data_root=self.root, compute_source_sha256=True)
        with patch("export_audit.module._get_engine", return_value=_FakeEngine([A4_PT])):
            r = run_export_audit_relpath(config=cfg, pdf_relpath="cv.pdf", layout=self.layout)
        self.assertEqual(len(r.meta["source_sha256"]), 64)

    def test_cli_rejects_bad_layout_artifact(self) -> None:
        not_object = self.root / "layout_list.json"
        not_object.write_text("[1, 2]\n", encoding="utf-8")
        cases = [(not_object, "LAYOUT_INVALID"), (self.root / "no_layout.json", "LAYOUT_UNREADABLE")]

        for layout_file, code in cases:
            out = self.root / "audit_bad.json"
            buf = io.StringIO()
            with redirect_stdout(buf):
                rc = export_audit_main(
                    ["--data-root", str(self.root), "--pdf-relpath", "cv.pdf", "--layout", str(layout_file), "--output", str(out)]
                )
            self.assertEqual(rc, 2)
            payload = json.loads(buf.getvalue().strip())
            self.assertFalse(payload["ok"])
            self.assertEqual(payload["errors"][0]["code"], code)
            self.assertFalse(out.exists())

    def test_cli_with_real_pdf(self) -> None:
        import pypdfium2 as pdfium

        pdf = pdfium.PdfDocument.new()
        page = pdf.new_page(*A4_PT)
        page.close()
        pdf.save(str(self.root / "real.pdf"))
        pdf.close()

        layout_file = self.root / "layout.json"
        write_layout_json_artifact(result=self.layout, out_file=layout_file)
        out = self.root / "audit.json"

        buf = io.StringIO()
        with redirect_stdout(buf):
            rc = export_audit_main(
                ["--data-root", str(self.root), "--pdf-relpath", "real.pdf", "--layout", str(layout_file), "--output", str(out)]
            )

        self.assertEqual(rc, 0)
        self.assertIn("ok=True", buf.getvalue())
        payload = json.loads(out.read_text(encoding="utf-8"))
        self.assertTrue(payload["ok"])
        self.assertEqual(payload["page_count"], 1)
        self.assertEqual(payload["engine"], "pypdfium2")


if __name__ == "__main__":
    unittest.main()
