from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from contracts.document import CVDocument, EducationEntry

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE = re.compile(r"^[\d\s+\-()]{8,}$")


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    code: str
    field: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "field": self.field, "message": self.message}


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL.match(email))


def is_valid_phone(phone: str) -> bool:
    return bool(_PHONE.match(phone))


def check_education_degree(edu: EducationEntry) -> str | None:
    """Flags degree-type / field combinations that cannot be right."""
    degree_type = (edu.degree_type or "").lower()
    field = (edu.field_of_study or "").lower()

    if "bachelor" in degree_type and "mba" in field:
        return "MBA is a Master's degree, not a Bachelor's"
    if "bachelor" in degree_type and "phd" in field:
        return "PhD is a Doctoral degree, not a Bachelor's"
    if "high school" in degree_type and field and field not in ("general", "other"):
        return "High School Diploma typically has no specific field of study"
    return None


def validate_document(document: CVDocument | dict[str, Any]) -> list[ValidationIssue]:
    """
    Submission checks for a raw document.

    Issues are diagnostics for the editor; layout runs regardless of them.
    """
    if not isinstance(document, CVDocument):
        document = CVDocument.from_dict(document)

    issues: list[ValidationIssue] = []
    personal = document.personal

    if not personal.full_name.strip():
        issues.append(ValidationIssue("REQUIRED_FULL_NAME", "personal.full_name", "Full name is required"))
    if not personal.job_title.strip():
        issues.append(ValidationIssue("REQUIRED_JOB_TITLE", "personal.job_title", "Job title is required"))

    has_experience = any(e.job_title.strip() and e.company.strip() for e in document.experience)
    has_education = any(e.degree.strip() and e.institution.strip() for e in document.education)
    has_skills = len(document.skills) > 0
    if not (has_experience or has_education or has_skills):
        issues.append(
            ValidationIssue(
                "REQUIRED_SECTION",
                "sections",
                "At least one of experience, education or skills must be filled",
            )
        )

    email = personal.email.strip()
    if email and not is_valid_email(email):
        issues.append(ValidationIssue("INVALID_EMAIL", "personal.email", "Email address is malformed"))
    phone = personal.phone.strip()
    if phone and not is_valid_phone(phone):
        issues.append(ValidationIssue("INVALID_PHONE", "personal.phone", "Phone number is malformed"))

    for i, edu in enumerate(document.education):
        msg = check_education_degree(edu)
        if msg is not None:
            issues.append(ValidationIssue("EDUCATION_DEGREE_MISMATCH", f"education[{i}]", msg))

    return issues
