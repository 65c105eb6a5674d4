from __future__ import annotations

import json
from typing import Any, Callable, Sequence, TypeVar

from contracts.document import (
    CanonicalCertification,
    CanonicalDocument,
    CanonicalEducation,
    CanonicalExperience,
    CertificationEntry,
    CVDocument,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    SocialLinks,
)

from .config import (
    DEFAULT_MONTH_NAMES,
    DEFAULT_NO_EXPIRY_LABEL,
    DEFAULT_PRESENT_LABEL,
    ContentLimits,
)
from .text import (
    clean_multiline,
    clean_text,
    count_text_lines,
    degree_display,
    extract_bullets,
    format_date,
    join_date_range,
    parse_leading_int,
    year_sort_key,
)

T = TypeVar("T")


def _warn(warnings: list[dict[str, Any]], code: str, message: str, **detail: Any) -> None:
    warnings.append({"code": code, "message": message, "detail": detail})


def canonicalize_warnings(warnings: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Deterministic warning order, independent of the order they were raised in.
    """

    def _key(w: dict[str, Any]) -> tuple[str, str]:
        detail = w.get("detail") or {}
        detail_canon = json.dumps(detail, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        return (str(w.get("code", "")), detail_canon)

    return sorted(warnings, key=_key)


def sort_newest_first(items: Sequence[T], year_of: Callable[[T], str]) -> list[T]:
    # sorted() is stable: equal years keep their input order.
    return sorted(items, key=lambda item: -year_sort_key(year_of(item)))


def _check_year(
    warnings: list[dict[str, Any]], *, section: str, entry_id: str, year: str
) -> None:
    if clean_text(year) != "" and parse_leading_int(year) is None:
        _warn(
            warnings,
            "NORMALIZE_UNPARSEABLE_YEAR",
            "Year is not numeric; entry sorted as oldest",
            section=section,
            entry_id=entry_id,
            year=year,
        )


def _cap(
    items: list[T],
    cap: int | None,
    warnings: list[dict[str, Any]],
    *,
    section: str,
) -> list[T]:
    if cap is None or len(items) <= cap:
        return items
    _warn(
        warnings,
        "NORMALIZE_ENTRIES_CAPPED",
        "Entry list exceeds configured maximum; trailing entries dropped",
        section=section,
        count_in=len(items),
        count_out=cap,
    )
    return items[:cap]


def normalize_personal(personal: PersonalInfo) -> PersonalInfo:
    links = personal.social_links
    return PersonalInfo(
        full_name=clean_text(personal.full_name),
        job_title=clean_text(personal.job_title),
        email=clean_text(personal.email),
        phone=clean_text(personal.phone),
        location=clean_text(personal.location),
        date_of_birth=clean_text(personal.date_of_birth),
        photo=personal.photo,
        social_links=SocialLinks(
            linkedin=clean_text(links.linkedin),
            github=clean_text(links.github),
            portfolio=clean_text(links.portfolio),
            twitter=clean_text(links.twitter),
            instagram=clean_text(links.instagram),
            behance=clean_text(links.behance),
        ),
    )


def normalize_experience(
    exp: ExperienceEntry,
    month_names: Sequence[str],
    *,
    limits: ContentLimits,
    present_label: str = DEFAULT_PRESENT_LABEL,
    warnings: list[dict[str, Any]] | None = None,
) -> CanonicalExperience:
    warnings = [] if warnings is None else warnings

    start = format_date(exp.start_month, exp.start_year, month_names)
    end = present_label if exp.current else format_date(exp.end_month, exp.end_year, month_names)

    description = clean_multiline(exp.description)
    if count_text_lines(description) > limits.max_description_lines:
        _warn(
            warnings,
            "NORMALIZE_DESCRIPTION_LINES_CAPPED",
            "Description has more lines than allowed; trailing lines dropped",
            entry_id=exp.id,
            lines_in=count_text_lines(description),
            lines_out=limits.max_description_lines,
        )
        description = clean_multiline(description, max_lines=limits.max_description_lines)

    extraction = extract_bullets(
        description,
        max_bullets=limits.max_bullets_per_entry,
        max_length=limits.max_bullet_length,
        marker=limits.truncation_marker,
    )
    if extraction.dropped_count:
        _warn(
            warnings,
            "NORMALIZE_BULLETS_CAPPED",
            "Too many bullets; trailing bullets dropped",
            entry_id=exp.id,
            dropped=extraction.dropped_count,
        )
    for i in extraction.truncated_indices:
        _warn(
            warnings,
            "NORMALIZE_BULLET_TRUNCATED",
            "Bullet exceeds maximum length; truncated with marker",
            entry_id=exp.id,
            bullet_index=i,
        )

    return CanonicalExperience(
        id=clean_text(exp.id),
        job_title=clean_text(exp.job_title),
        company=clean_text(exp.company),
        description=description,
        bullets=extraction.bullets,
        date_range=join_date_range(start, end),
        start_year=clean_text(exp.start_year),
    )


def normalize_education(edu: EducationEntry, month_names: Sequence[str]) -> CanonicalEducation:
    degree = clean_text(edu.degree) or degree_display(
        clean_text(edu.degree_type), clean_text(edu.field_of_study)
    )
    return CanonicalEducation(
        id=clean_text(edu.id),
        degree=degree,
        institution=clean_text(edu.institution),
        thesis_title=clean_text(edu.thesis_title),
        gpa=clean_text(edu.gpa),
        grad_date=format_date(edu.grad_month, edu.grad_year, month_names),
        grad_year=clean_text(edu.grad_year),
    )


def normalize_certification(
    cert: CertificationEntry,
    month_names: Sequence[str],
    *,
    no_expiry_label: str = DEFAULT_NO_EXPIRY_LABEL,
) -> CanonicalCertification:
    issue_date = format_date(cert.issue_month, cert.issue_year, month_names)
    expiry_date = (
        no_expiry_label
        if cert.no_expiry
        else format_date(cert.expiry_month, cert.expiry_year, month_names)
    )
    return CanonicalCertification(
        id=clean_text(cert.id),
        name=clean_text(cert.name),
        issuer=clean_text(cert.issuer),
        credential_id=clean_text(cert.credential_id),
        credential_url=clean_text(cert.credential_url),
        issue_date=issue_date,
        expiry_date=expiry_date,
        date_range=join_date_range(issue_date, expiry_date),
        issue_year=clean_text(cert.issue_year),
    )


def normalize_skills(
    skills: Sequence[Any],
    *,
    limits: ContentLimits,
    warnings: list[dict[str, Any]] | None = None,
) -> list[str]:
    cleaned = [s for s in (clean_text(x) for x in skills) if s]
    if len(cleaned) > limits.max_skills_display:
        if warnings is not None:
            _warn(
                warnings,
                "NORMALIZE_SKILLS_CAPPED",
                "Too many skills; trailing skills dropped",
                count_in=len(cleaned),
                count_out=limits.max_skills_display,
            )
        cleaned = cleaned[: limits.max_skills_display]
    return cleaned


def normalize_languages(languages: Sequence[LanguageEntry]) -> list[LanguageEntry]:
    out: list[LanguageEntry] = []
    for lang in languages:
        entry = LanguageEntry(name=clean_text(lang.name), level=clean_text(lang.level))
        if entry.name or entry.level:
            out.append(entry)
    return out


def normalize_document_with_warnings(
    document: CVDocument | dict[str, Any],
    month_names: Sequence[str] = DEFAULT_MONTH_NAMES,
    *,
    limits: ContentLimits | None = None,
    present_label: str = DEFAULT_PRESENT_LABEL,
    no_expiry_label: str = DEFAULT_NO_EXPIRY_LABEL,
) -> tuple[CanonicalDocument, list[dict[str, Any]]]:
    """
    Normalize a raw document and report every clamping decision.

    Never raises for content problems: malformed fields degrade to empty values.
    Repeatable sections are sorted newest-first (stable) BEFORE their caps apply.
    """

    if not isinstance(document, CVDocument):
        document = CVDocument.from_dict(document)
    limits = limits or ContentLimits()
    warnings: list[dict[str, Any]] = []

    for e in document.experience:
        _check_year(warnings, section="experience", entry_id=e.id, year=e.start_year)
    for ed in document.education:
        _check_year(warnings, section="education", entry_id=ed.id, year=ed.grad_year)
    for c in document.certifications:
        _check_year(warnings, section="certifications", entry_id=c.id, year=c.issue_year)

    experience = _cap(
        sort_newest_first(document.experience, lambda e: e.start_year),
        limits.max_experience_entries,
        warnings,
        section="experience",
    )
    education = _cap(
        sort_newest_first(document.education, lambda e: e.grad_year),
        limits.max_education_entries,
        warnings,
        section="education",
    )
    certifications = _cap(
        sort_newest_first(document.certifications, lambda c: c.issue_year),
        limits.max_certification_entries,
        warnings,
        section="certifications",
    )
    languages = _cap(
        normalize_languages(document.languages),
        limits.max_languages,
        warnings,
        section="languages",
    )

    canonical = CanonicalDocument(
        personal=normalize_personal(document.personal),
        summary=clean_multiline(document.summary),
        experience=[
            normalize_experience(
                e, month_names, limits=limits, present_label=present_label, warnings=warnings
            )
            for e in experience
        ],
        education=[normalize_education(e, month_names) for e in education],
        certifications=[
            normalize_certification(c, month_names, no_expiry_label=no_expiry_label)
            for c in certifications
        ],
        skills=normalize_skills(document.skills, limits=limits, warnings=warnings),
        languages=languages,
    )
    return canonical, canonicalize_warnings(warnings)


def normalize_document(
    document: CVDocument | dict[str, Any],
    month_names: Sequence[str] = DEFAULT_MONTH_NAMES,
    *,
    limits: ContentLimits | None = None,
    present_label: str = DEFAULT_PRESENT_LABEL,
    no_expiry_label: str = DEFAULT_NO_EXPIRY_LABEL,
) -> CanonicalDocument:
    canonical, _ = normalize_document_with_warnings(
        document,
        month_names,
        limits=limits,
        present_label=present_label,
        no_expiry_label=no_expiry_label,
    )
    return canonical
