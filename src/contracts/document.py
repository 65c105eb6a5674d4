from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _pick(d: dict[str, Any], *keys: str) -> Any:
    # Saved documents from the editor use camelCase; artifacts use snake_case.
    for k in keys:
        if k in d:
            return d[k]
    return None


def _str(d: dict[str, Any], *keys: str) -> str:
    v = _pick(d, *keys)
    if v is None or isinstance(v, (dict, list)):
        return ""
    if isinstance(v, bool):
        return ""
    return str(v)


def _bool(d: dict[str, Any], *keys: str) -> bool:
    v = _pick(d, *keys)
    if isinstance(v, str):
        return v.strip().lower() in ("true", "1", "yes")
    return bool(v)


def _dicts(v: Any) -> list[dict[str, Any]]:
    if not isinstance(v, list):
        return []
    return [x for x in v if isinstance(x, dict)]


def _as_dict(v: Any) -> dict[str, Any]:
    return v if isinstance(v, dict) else {}


@dataclass(frozen=True, slots=True)
class SocialLinks:
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    twitter: str = ""
    instagram: str = ""
    behance: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "linkedin": self.linkedin,
            "github": self.github,
            "portfolio": self.portfolio,
            "twitter": self.twitter,
            "instagram": self.instagram,
            "behance": self.behance,
        }

    @staticmethod
    def from_dict(d: Any) -> "SocialLinks":
        d = _as_dict(d)
        return SocialLinks(
            linkedin=_str(d, "linkedin"),
            github=_str(d, "github"),
            portfolio=_str(d, "portfolio"),
            twitter=_str(d, "twitter"),
            instagram=_str(d, "instagram"),
            behance=_str(d, "behance"),
        )


@dataclass(frozen=True, slots=True)
class PersonalInfo:
    full_name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    date_of_birth: str = ""
    photo: str | None = None
    social_links: SocialLinks = SocialLinks()

    def to_dict(self) -> dict[str, Any]:
        return {
            "full_name": self.full_name,
            "job_title": self.job_title,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "date_of_birth": self.date_of_birth,
            "photo": self.photo,
            "social_links": self.social_links.to_dict(),
        }

    @staticmethod
    def from_dict(d: Any) -> "PersonalInfo":
        d = _as_dict(d)
        photo = _pick(d, "photo")
        return PersonalInfo(
            full_name=_str(d, "full_name", "fullName"),
            job_title=_str(d, "job_title", "jobTitle"),
            email=_str(d, "email"),
            phone=_str(d, "phone"),
            location=_str(d, "location"),
            date_of_birth=_str(d, "date_of_birth", "dateOfBirth"),
            photo=(str(photo) if isinstance(photo, str) and photo != "" else None),
            social_links=SocialLinks.from_dict(_pick(d, "social_links", "socialLinks")),
        )


@dataclass(frozen=True, slots=True)
class ExperienceEntry:
    id: str
    job_title: str = ""
    company: str = ""
    start_month: str = ""
    start_year: str = ""
    end_month: str = ""
    end_year: str = ""
    current: bool = False
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "job_title": self.job_title,
            "company": self.company,
            "start_month": self.start_month,
            "start_year": self.start_year,
            "end_month": self.end_month,
            "end_year": self.end_year,
            "current": self.current,
            "description": self.description,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ExperienceEntry":
        return ExperienceEntry(
            id=_str(d, "id"),
            job_title=_str(d, "job_title", "jobTitle"),
            company=_str(d, "company"),
            start_month=_str(d, "start_month", "startMonth"),
            start_year=_str(d, "start_year", "startYear"),
            end_month=_str(d, "end_month", "endMonth"),
            end_year=_str(d, "end_year", "endYear"),
            current=_bool(d, "current"),
            description=_str(d, "description"),
        )


@dataclass(frozen=True, slots=True)
class EducationEntry:
    id: str
    degree_type: str = ""  # e.g. "Bachelor's Degree"
    field_of_study: str = ""  # e.g. "Computer Science"
    degree: str = ""  # display string, free text or derived
    institution: str = ""
    grad_month: str = ""
    grad_year: str = ""
    gpa: str = ""
    thesis_title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "degree_type": self.degree_type,
            "field_of_study": self.field_of_study,
            "degree": self.degree,
            "institution": self.institution,
            "grad_month": self.grad_month,
            "grad_year": self.grad_year,
            "gpa": self.gpa,
            "thesis_title": self.thesis_title,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "EducationEntry":
        return EducationEntry(
            id=_str(d, "id"),
            degree_type=_str(d, "degree_type", "degreeType"),
            field_of_study=_str(d, "field_of_study", "fieldOfStudy"),
            degree=_str(d, "degree"),
            institution=_str(d, "institution"),
            grad_month=_str(d, "grad_month", "gradMonth"),
            grad_year=_str(d, "grad_year", "gradYear"),
            gpa=_str(d, "gpa"),
            thesis_title=_str(d, "thesis_title", "thesisTitle"),
        )


@dataclass(frozen=True, slots=True)
class CertificationEntry:
    id: str
    name: str = ""
    issuer: str = ""
    issue_month: str = ""
    issue_year: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    no_expiry: bool = False
    credential_id: str = ""
    credential_url: str = ""
    mode: str = ""  # "online" | "in-person" | ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "issuer": self.issuer,
            "issue_month": self.issue_month,
            "issue_year": self.issue_year,
            "expiry_month": self.expiry_month,
            "expiry_year": self.expiry_year,
            "no_expiry": self.no_expiry,
            "credential_id": self.credential_id,
            "credential_url": self.credential_url,
            "mode": self.mode,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CertificationEntry":
        return CertificationEntry(
            id=_str(d, "id"),
            name=_str(d, "name"),
            issuer=_str(d, "issuer"),
            issue_month=_str(d, "issue_month", "issueMonth"),
            issue_year=_str(d, "issue_year", "issueYear"),
            expiry_month=_str(d, "expiry_month", "expiryMonth"),
            expiry_year=_str(d, "expiry_year", "expiryYear"),
            no_expiry=_bool(d, "no_expiry", "noExpiry"),
            credential_id=_str(d, "credential_id", "credentialId"),
            credential_url=_str(d, "credential_url", "credentialUrl"),
            mode=_str(d, "mode"),
        )


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    name: str = ""
    level: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "level": self.level}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LanguageEntry":
        return LanguageEntry(name=_str(d, "name"), level=_str(d, "level"))


@dataclass(frozen=True, slots=True)
class CVDocument:
    """
    Pre-normalization document as supplied by the editor or a saved file.

    `from_dict` is total over JSON objects: unknown keys are ignored, missing keys
    become empty values and non-object list entries are skipped.
    """

    personal: PersonalInfo
    summary: str
    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    certifications: list[CertificationEntry]
    skills: list[str]
    languages: list[LanguageEntry]

    def to_dict(self) -> dict[str, Any]:
        return {
            "personal": self.personal.to_dict(),
            "summary": self.summary,
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "certifications": [c.to_dict() for c in self.certifications],
            "skills": list(self.skills),
            "languages": [l.to_dict() for l in self.languages],
        }

    @staticmethod
    def from_dict(d: Any) -> "CVDocument":
        d = _as_dict(d)
        skills_raw = d.get("skills")
        skills = [str(s) for s in skills_raw if isinstance(s, (str, int, float)) and not isinstance(s, bool)] if isinstance(skills_raw, list) else []
        return CVDocument(
            personal=PersonalInfo.from_dict(_pick(d, "personal", "profile")),
            summary=_str(d, "summary"),
            experience=[ExperienceEntry.from_dict(x) for x in _dicts(d.get("experience"))],
            education=[EducationEntry.from_dict(x) for x in _dicts(d.get("education"))],
            certifications=[CertificationEntry.from_dict(x) for x in _dicts(d.get("certifications"))],
            skills=skills,
            languages=[LanguageEntry.from_dict(x) for x in _dicts(d.get("languages"))],
        )


@dataclass(frozen=True, slots=True)
class CanonicalExperience:
    id: str
    job_title: str
    company: str
    description: str  # cleaned, newline-preserving
    bullets: list[str]  # bounded, glyph-free, truncated
    date_range: str
    start_year: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "job_title": self.job_title,
            "company": self.company,
            "description": self.description,
            "bullets": list(self.bullets),
            "date_range": self.date_range,
            "start_year": self.start_year,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CanonicalExperience":
        return CanonicalExperience(
            id=str(d.get("id", "")),
            job_title=str(d.get("job_title", "")),
            company=str(d.get("company", "")),
            description=str(d.get("description", "")),
            bullets=[str(x) for x in (d.get("bullets") or [])],
            date_range=str(d.get("date_range", "")),
            start_year=str(d.get("start_year", "")),
        )


@dataclass(frozen=True, slots=True)
class CanonicalEducation:
    id: str
    degree: str
    institution: str
    thesis_title: str
    gpa: str
    grad_date: str
    grad_year: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "degree": self.degree,
            "institution": self.institution,
            "thesis_title": self.thesis_title,
            "gpa": self.gpa,
            "grad_date": self.grad_date,
            "grad_year": self.grad_year,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CanonicalEducation":
        return CanonicalEducation(
            id=str(d.get("id", "")),
            degree=str(d.get("degree", "")),
            institution=str(d.get("institution", "")),
            thesis_title=str(d.get("thesis_title", "")),
            gpa=str(d.get("gpa", "")),
            grad_date=str(d.get("grad_date", "")),
            grad_year=str(d.get("grad_year", "")),
        )


@dataclass(frozen=True, slots=True)
class CanonicalCertification:
    id: str
    name: str
    issuer: str
    credential_id: str
    credential_url: str
    issue_date: str
    expiry_date: str
    date_range: str
    issue_year: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "issuer": self.issuer,
            "credential_id": self.credential_id,
            "credential_url": self.credential_url,
            "issue_date": self.issue_date,
            "expiry_date": self.expiry_date,
            "date_range": self.date_range,
            "issue_year": self.issue_year,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CanonicalCertification":
        return CanonicalCertification(
            id=str(d.get("id", "")),
            name=str(d.get("name", "")),
            issuer=str(d.get("issuer", "")),
            credential_id=str(d.get("credential_id", "")),
            credential_url=str(d.get("credential_url", "")),
            issue_date=str(d.get("issue_date", "")),
            expiry_date=str(d.get("expiry_date", "")),
            date_range=str(d.get("date_range", "")),
            issue_year=str(d.get("issue_year", "")),
        )


@dataclass(frozen=True, slots=True)
class CanonicalDocument:
    """
    Normalized, sorted and length-bounded document consumed by layout.

    Every text field is whitespace-collapsed and trimmed; repeatable lists are
    ordered newest-first and already capped.
    """

    personal: PersonalInfo
    summary: str
    experience: list[CanonicalExperience]
    education: list[CanonicalEducation]
    certifications: list[CanonicalCertification]
    skills: list[str]
    languages: list[LanguageEntry]

    def to_dict(self) -> dict[str, Any]:
        return {
            "personal": self.personal.to_dict(),
            "summary": self.summary,
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "certifications": [c.to_dict() for c in self.certifications],
            "skills": list(self.skills),
            "languages": [l.to_dict() for l in self.languages],
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CanonicalDocument":
        return CanonicalDocument(
            personal=PersonalInfo.from_dict(d.get("personal")),
            summary=str(d.get("summary", "")),
            experience=[CanonicalExperience.from_dict(x) for x in (d.get("experience") or [])],
            education=[CanonicalEducation.from_dict(x) for x in (d.get("education") or [])],
            certifications=[CanonicalCertification.from_dict(x) for x in (d.get("certifications") or [])],
            skills=[str(x) for x in (d.get("skills") or [])],
            languages=[LanguageEntry.from_dict(x) for x in (d.get("languages") or [])],
        )
