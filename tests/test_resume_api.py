import os
import sys
import unittest
from io import BytesIO
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests independent of the per-client limit.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from docx import Document  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.services.upload_security import validate_upload_signature  # noqa: E402

SAMPLE_RESUME = (
    "Jane Doe\njane@x.com\n555-123-4567\nEXPERIENCE\nAcme Corp - Engineer\n2019-2022\n"
    "• Built scalable systems\nEDUCATION\nState University Bachelor Computer Science 2018\n"
    "SKILLS\nPython, SQL, Git"
)


def _docx_bytes(text: str) -> bytes:
    document = Document()
    for line in text.split("\n"):
        document.add_paragraph(line)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class ResumeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["supported_types"], ["pdf", "docx", "txt"])

    def test_analyze_text_contract_shape(self):
        response = self.client.post("/v1/resume/analyze-text", json={"resume_text": SAMPLE_RESUME})
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["parsed_resume"]["name"], "Jane Doe")
        self.assertEqual(body["analysis"]["overall_score"], 61)
        self.assertEqual(body["analysis"]["detected_role"], "Software Engineer")
        self.assertEqual(
            set(body["analysis"]["scores"]),
            {"structure", "content", "keywords", "readability"},
        )
        self.assertIn("generated_at", body)

    def test_analyze_text_rejects_empty_text(self):
        response = self.client.post("/v1/resume/analyze-text", json={"resume_text": ""})
        self.assertEqual(response.status_code, 422)

    def test_analyze_txt_upload(self):
        response = self.client.post(
            "/v1/resume/analyze",
            files={"file": ("resume.txt", SAMPLE_RESUME.encode("utf-8"), "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["parsed_resume"]["email"], "jane@x.com")
        self.assertEqual(len(body["parsed_resume"]["work_experience"]), 1)

    def test_analyze_docx_upload(self):
        response = self.client.post(
            "/v1/resume/analyze",
            files={
                "file": (
                    "resume.docx",
                    _docx_bytes(SAMPLE_RESUME),
                    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                )
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["analysis"]["overall_score"], 61)

    def test_unsupported_extension_is_rejected(self):
        response = self.client.post(
            "/v1/resume/analyze",
            files={"file": ("resume.png", b"\x89PNG\r\n\x1a\n", "image/png")},
        )
        self.assertEqual(response.status_code, 400)

    def test_signature_mismatch_is_rejected(self):
        response = self.client.post(
            "/v1/resume/analyze",
            files={"file": ("resume.pdf", b"plain text pretending to be a pdf", "application/pdf")},
        )
        self.assertEqual(response.status_code, 400)

    def test_unreadable_pdf_returns_retry_message(self):
        response = self.client.post(
            "/v1/resume/analyze",
            files={"file": ("resume.pdf", b"%PDF-1.4 truncated", "application/pdf")},
        )
        self.assertEqual(response.status_code, 422)
        self.assertEqual(
            response.json()["detail"],
            "Could not read this file. Please upload a different PDF, DOCX or TXT file.",
        )

    def test_oversized_upload_is_rejected(self):
        tiny_limit = SimpleNamespace(max_upload_bytes=16, max_upload_mb=0)
        with patch("app.api.v1.resume.settings", tiny_limit):
            response = self.client.post(
                "/v1/resume/analyze",
                files={"file": ("resume.txt", b"x" * 64, "text/plain")},
            )
        self.assertEqual(response.status_code, 413)

    def test_job_matches_from_parsed_resume(self):
        parsed = self.client.post("/v1/resume/analyze-text", json={"resume_text": SAMPLE_RESUME}).json()
        response = self.client.post("/v1/resume/job-matches", json=parsed["parsed_resume"])
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["detected_role"], "Software Engineer")
        self.assertEqual(body["level"], "Junior")
        self.assertTrue(1 <= len(body["matches"]) <= 6)
        for match in body["matches"]:
            self.assertTrue(50 <= match["match_score"] <= 95)
            self.assertTrue(match["external_search_url"].startswith("https://www.linkedin.com/jobs/search/?keywords="))

    def test_job_matches_accepts_huge_year_counts(self):
        response = self.client.post("/v1/resume/job-matches", json={"raw_text": "9" * 5000 + " years"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["level"], "Entry Level")


class UploadSignatureTests(unittest.TestCase):
    def test_utf8_text_with_accents_passes(self):
        validate_upload_signature(filename="cv.txt", content="José Núñez\nIngeniero".encode("utf-8"))

    def test_binary_text_is_rejected(self):
        with self.assertRaises(ValueError):
            validate_upload_signature(filename="cv.txt", content=b"\x00\x01\x02\x03")

    def test_legacy_doc_is_rejected(self):
        with self.assertRaises(ValueError):
            validate_upload_signature(filename="cv.doc", content=b"\xd0\xcf\x11\xe0")

    def test_zip_without_word_part_is_not_docx(self):
        with self.assertRaises(ValueError):
            validate_upload_signature(filename="cv.docx", content=b"PK\x03\x04not-a-real-zip")


if __name__ == "__main__":
    unittest.main()
