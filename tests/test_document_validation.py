from __future__ import annotations

import unittest

from normalize_cv.validation import is_valid_email, is_valid_phone, validate_document


class TestDocumentValidation(unittest.TestCase):
    def test_empty_document_reports_required_fields(self) -> None:
        codes = [i.code for i in validate_document({})]
        self.assertEqual(codes, ["REQUIRED_FULL_NAME", "REQUIRED_JOB_TITLE", "REQUIRED_SECTION"])

    def test_any_one_section_satisfies_requirement(self) -> None:
        base = {"personal": {"fullName": "Jane", "jobTitle": "Analyst"}}
        with_skill = dict(base, skills=["SQL"])
        with_exp = dict(base, experience=[{"id": "1", "jobTitle": "Dev", "company": "Acme"}])
        half_exp = dict(base, experience=[{"id": "1", "jobTitle": "Dev", "company": "  "}])

        self.assertEqual(validate_document(with_skill), [])
        self.assertEqual(validate_document(with_exp), [])
        self.assertEqual([i.code for i in validate_document(half_exp)], ["REQUIRED_SECTION"])

    def test_contact_format_checked_only_when_present(self) -> None:
        doc = {
            "personal": {"fullName": "Jane", "jobTitle": "Analyst", "email": "jane@", "phone": "12"},
            "skills": ["SQL"],
        }
        codes = [i.code for i in validate_document(doc)]
        self.assertEqual(codes, ["INVALID_EMAIL", "INVALID_PHONE"])

        self.assertTrue(is_valid_email("jane@example.com"))
        self.assertTrue(is_valid_phone("+964 750 123 4567"))
        self.assertFalse(is_valid_phone("call me"))

    def test_education_degree_mismatch(self) -> None:
        doc = {
            "personal": {"fullName": "Jane", "jobTitle": "Analyst"},
            "education": [
                {"id": "1", "degreeType": "Bachelor's Degree", "fieldOfStudy": "MBA"},
                {"id": "2", "degreeType": "High School Diploma", "fieldOfStudy": "General"},
                {"id": "3", "degreeType": "High School Diploma", "fieldOfStudy": "Biology"},
            ],
            "skills": ["SQL"],
        }
        issues = validate_document(doc)
        self.assertEqual([(i.code, i.field) for i in issues], [
            ("EDUCATION_DEGREE_MISMATCH", "education[0]"),
            ("EDUCATION_DEGREE_MISMATCH", "education[2]"),
        ])


if __name__ == "__main__":
    unittest.main()
