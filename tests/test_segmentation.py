import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.segmentation import classify_header, segment_document, split_lines  # noqa: E402


class HeaderClassificationTests(unittest.TestCase):
    def test_plain_headers(self):
        self.assertEqual(classify_header("EXPERIENCE").section, "experience")
        self.assertEqual(classify_header("Work Experience").section, "experience")
        self.assertEqual(classify_header("Technical Skills:").section, "skills")
        self.assertEqual(classify_header("Licenses & Certifications").section, "certifications")

    def test_head_noun_decides_the_section(self):
        self.assertEqual(classify_header("Academic Projects").section, "projects")

    def test_prose_mentioning_a_keyword_is_not_a_header(self):
        self.assertIsNone(classify_header("Gathered the project requirements from clients"))
        self.assertIsNone(classify_header("Extensive experience with cloud systems"))

    def test_lines_with_digits_or_email_are_not_headers(self):
        self.assertIsNone(classify_header("Education 2018"))
        self.assertIsNone(classify_header("skills@example.com"))

    def test_inline_label_header_keeps_its_content(self):
        match = classify_header("Skills: Python, SQL")
        self.assertIsNotNone(match)
        self.assertEqual(match.section, "skills")
        self.assertEqual(match.inline_content, "Python, SQL")

    def test_inline_label_that_is_not_a_section(self):
        self.assertIsNone(classify_header("Stack: Python, SQL"))

    def test_bulleted_lines_never_open_a_section(self):
        self.assertIsNone(classify_header("• Key project: migrated billing to AWS"))
        self.assertIsNone(classify_header("- Technologies: React, Node"))
        self.assertIsNone(classify_header("• Projects"))

    def test_inline_label_must_be_all_header_words(self):
        self.assertIsNone(classify_header("Big project: internal billing rewrite"))


class SegmentDocumentTests(unittest.TestCase):
    def test_split_lines_trims_and_drops_blanks(self):
        self.assertEqual(split_lines("  a \n\n\t\nb  "), ["a", "b"])
        self.assertEqual(split_lines(""), [])

    def test_segments_are_explicit_ranges(self):
        text = "Jane Doe\nEXPERIENCE\nAcme - Engineer\nEDUCATION\nState University 2018\n"
        segments = segment_document(text)

        self.assertEqual([segment.section for segment in segments.segments], ["experience", "education"])
        self.assertEqual(segments.lines_for("experience"), ["Acme - Engineer"])
        self.assertEqual(segments.lines_for("education"), ["State University 2018"])
        self.assertEqual(segments.preamble, ["Jane Doe"])

    def test_keyword_inside_a_bullet_does_not_reopen_a_section(self):
        text = (
            "EXPERIENCE\n"
            "Acme - Engineer\n"
            "• Gathered the project requirements from stakeholders\n"
            "• Shipped the billing service\n"
        )
        segments = segment_document(text)

        self.assertFalse(segments.has_section("projects"))
        self.assertEqual(len(segments.lines_for("experience")), 3)

    def test_repeated_section_yields_two_segments(self):
        text = "SKILLS\nPython\nPROJECTS\nTodo app\nSKILLS\nSQL"
        segments = segment_document(text)

        self.assertEqual(segments.segments_for("skills"), [["Python"], ["SQL"]])
        self.assertEqual(segments.lines_for("skills"), ["Python", "SQL"])

    def test_inline_content_starts_the_segment(self):
        segments = segment_document("Skills: Python, SQL\nGit")
        self.assertEqual(segments.lines_for("skills"), ["Python, SQL", "Git"])

    def test_unknown_sections_end_the_previous_one(self):
        segments = segment_document("SKILLS\nPython\nHOBBIES\nChess")
        self.assertEqual(segments.lines_for("skills"), ["Python"])
        self.assertEqual(segments.lines_for("interests"), ["Chess"])

    def test_document_without_headers(self):
        segments = segment_document("Just a paragraph of text")
        self.assertEqual(segments.segments, ())
        self.assertEqual(segments.preamble, ["Just a paragraph of text"])


if __name__ == "__main__":
    unittest.main()
