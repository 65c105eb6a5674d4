from __future__ import annotations

from typing import Any

from contracts.layout import LayoutResult
from layout.config import PageGeometry

from .contracts import (
    ExportAuditConfig,
    ExportAuditError,
    ExportAuditPage,
    ExportAuditResult,
    InspectionEngineName,
)
from .data_access import DataAccessError, resolve_under_data_root, sha256_file
from .engines import Pypdfium2Engine


def _get_engine(engine: InspectionEngineName):
    if engine == InspectionEngineName.PYPDFIUM2:
        return Pypdfium2Engine()
    raise ValueError(f"Unsupported inspection engine: {engine}")


def _failed(
    *,
    config: ExportAuditConfig,
    pdf_relpath: str,
    layout: LayoutResult,
    error: ExportAuditError,
    meta: dict[str, Any],
) -> ExportAuditResult:
    return ExportAuditResult(
        ok=False,
        engine=config.engine,
        source_pdf_relpath=pdf_relpath,
        expected_pages=layout.total_pages,
        page_count=0,
        pages=[],
        errors=[error],
        meta=meta,
    )


def compare_with_layout(
    *,
    pages: list[ExportAuditPage],
    layout: LayoutResult,
    geometry: PageGeometry,
    size_tolerance_pt: float,
) -> list[ExportAuditError]:
    """
    Exported pages vs. the layout they were rendered from:
    - same number of pages as `layout.total_pages`
    - every page matches the configured physical page size (within tolerance)
    """

    errs: list[ExportAuditError] = []
    if len(pages) != layout.total_pages:
        errs.append(
            ExportAuditError(
                code="EXPORT_PAGE_COUNT_MISMATCH",
                message="Exported PDF page count differs from the layout",
                detail={"expected_pages": layout.total_pages, "page_count": len(pages)},
            )
        )

    expected_w, expected_h = geometry.size_pt()
    for p in pages:
        if abs(p.width_pt - expected_w) > size_tolerance_pt or abs(p.height_pt - expected_h) > size_tolerance_pt:
            errs.append(
                ExportAuditError(
                    code="EXPORT_PAGE_SIZE_MISMATCH",
                    message="Exported page size differs from the configured page geometry",
                    detail={
                        "page_num": p.page_num,
                        "width_pt": round(p.width_pt, 2),
                        "height_pt": round(p.height_pt, 2),
                        "expected_width_pt": round(expected_w, 2),
                        "expected_height_pt": round(expected_h, 2),
                    },
                )
            )
    return errs


def run_export_audit_relpath(
    *,
    config: ExportAuditConfig,
    pdf_relpath: str,
    layout: LayoutResult,
    geometry: PageGeometry | None = None,
) -> ExportAuditResult:
    """
    Preferred programmatic entrypoint.

    Input: exported PDF relpath under `config.data_root` + the LayoutResult it was
    rendered from. Output: JSON-ready audit result; data problems never raise.
    """

    geometry = geometry or PageGeometry()
    engine = _get_engine(config.engine)
    meta: dict[str, Any] = {
        "backend": engine.backend_id(),
        "backend_version": engine.backend_version(),
        "size_tolerance_pt": config.size_tolerance_pt,
        "expected_page_size_pt": [round(x, 2) for x in geometry.size_pt()],
    }

    if not pdf_relpath.lower().endswith(".pdf"):
        return _failed(
            config=config,
            pdf_relpath=pdf_relpath,
            layout=layout,
            error=ExportAuditError(
                code="EXPORT_INPUT_NOT_PDF",
                message="Export audit only accepts PDFs (by .pdf extension)",
                detail={"pdf_relpath": pdf_relpath},
            ),
            meta=meta,
        )

    try:
        pdf_file = resolve_under_data_root(data_root=config.data_root, relpath=pdf_relpath)
    except DataAccessError as e:
        return _failed(
            config=config,
            pdf_relpath=pdf_relpath,
            layout=layout,
            error=ExportAuditError(
                code="EXPORT_DATA_ACCESS_ERROR",
                message=str(e),
                detail={"data_root": str(config.data_root), "relpath": pdf_relpath},
            ),
            meta=meta,
        )

    if not pdf_file.exists():
        return _failed(
            config=config,
            pdf_relpath=pdf_relpath,
            layout=layout,
            error=ExportAuditError(
                code="EXPORT_INPUT_NOT_FOUND",
                message="Exported PDF not found",
                detail={"pdf_relpath": pdf_relpath},
            ),
            meta=meta,
        )

    try:
        sizes = engine.get_page_sizes(pdf_file=pdf_file)
    except Exception as e:
        return _failed(
            config=config,
            pdf_relpath=pdf_relpath,
            layout=layout,
            error=ExportAuditError(
                code="EXPORT_BACKEND_FAILED",
                message="Failed to read exported PDF",
                detail={"error": repr(e)},
            ),
            meta=meta,
        )

    pages = [
        ExportAuditPage(page_num=i + 1, width_pt=float(w), height_pt=float(h))
        for i, (w, h) in enumerate(sizes)
    ]

    if config.compute_source_sha256:
        try:
            meta["source_sha256"] = sha256_file(pdf_file)
        except OSError as e:
            meta.setdefault("audit_warnings", []).append(
                {"code": "EXPORT_SOURCE_HASH_FAILED", "error": repr(e)}
            )

    errors = compare_with_layout(
        pages=pages,
        layout=layout,
        geometry=geometry,
        size_tolerance_pt=config.size_tolerance_pt,
    )
    return ExportAuditResult(
        ok=not errors,
        engine=config.engine,
        source_pdf_relpath=pdf_relpath,
        expected_pages=layout.total_pages,
        page_count=len(pages),
        pages=pages,
        errors=errors,
        meta=meta,
    )
