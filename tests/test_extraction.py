import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.extraction import parse_resume_text  # noqa: E402
from app.extraction.contact import extract_name  # noqa: E402
from app.extraction.education import build_education, extract_degree  # noqa: E402
from app.extraction.experience import extract_duration, parse_job_header  # noqa: E402
from app.schemas.resume import ParsedResume  # noqa: E402
from app.taxonomy.vocabulary import NAME_NOT_FOUND  # noqa: E402

SAMPLE_RESUME = (
    "Jane Doe\n"
    "jane@x.com\n"
    "555-123-4567\n"
    "EXPERIENCE\n"
    "Acme Corp - Engineer\n"
    "2019-2022\n"
    "• Built scalable systems\n"
    "EDUCATION\n"
    "State University Bachelor Computer Science 2018\n"
    "SKILLS\n"
    "Python, SQL, Git"
)


class ResumeParserTests(unittest.TestCase):
    def test_end_to_end_sample(self):
        resume = parse_resume_text(SAMPLE_RESUME)

        self.assertEqual(resume.name, "Jane Doe")
        self.assertEqual(resume.email, "jane@x.com")
        self.assertEqual(resume.phone, "555-123-4567")

        self.assertEqual(len(resume.work_experience), 1)
        job = resume.work_experience[0]
        self.assertIn("Acme Corp", job.company)
        self.assertIn("Engineer", job.position)
        self.assertIn("2019", job.duration)
        self.assertIn("2022", job.duration)
        self.assertEqual(job.responsibilities, ["Built scalable systems"])

        self.assertEqual(len(resume.education), 1)
        education = resume.education[0]
        self.assertEqual(education.graduation_year, "2018")
        self.assertEqual(education.degree, "Bachelor")
        self.assertEqual(education.field, "computer science")

        self.assertTrue({"python", "sql", "git"}.issubset(resume.skills))
        self.assertTrue({"Python", "SQL", "Git"}.issubset(resume.skills))
        self.assertEqual(resume.raw_text, SAMPLE_RESUME)

    def test_empty_document(self):
        resume = parse_resume_text("")

        self.assertEqual(resume.name, NAME_NOT_FOUND)
        self.assertFalse(resume.has_name)
        self.assertEqual(resume.email, "")
        self.assertEqual(resume.phone, "")
        self.assertEqual(resume.education, [])
        self.assertEqual(resume.work_experience, [])
        self.assertEqual(resume.projects, [])
        self.assertEqual(resume.certifications, [])
        self.assertEqual(resume.skills, [])

    def test_skills_have_no_case_sensitive_duplicates(self):
        resume = parse_resume_text("SKILLS\npython, Python, python\nTECHNOLOGIES\nPython; Docker")
        self.assertEqual(len(resume.skills), len(set(resume.skills)))
        self.assertEqual(resume.skills[0], "python")
        self.assertIn("Docker", resume.skills)

    def test_inline_education_line_inside_experience(self):
        text = (
            "EXPERIENCE\n"
            "Acme Corp - Engineer 2019-2022\n"
            "Education: BS Computer Science, State University, 2020\n"
            "SKILLS\n"
            "Python, Docker\n"
        )
        resume = parse_resume_text(text)

        self.assertEqual(len(resume.education), 1)
        self.assertEqual(resume.education[0].graduation_year, "2020")
        self.assertEqual(resume.education[0].degree, "Bs")
        self.assertEqual(len(resume.work_experience), 1)
        self.assertIn("Docker", resume.skills)

    def test_project_keyword_in_experience_bullet_does_not_create_projects(self):
        text = (
            "EXPERIENCE\n"
            "Acme Corp - Engineer 2019-2022\n"
            "• Owned the project roadmap for the payments team\n"
        )
        resume = parse_resume_text(text)

        self.assertEqual(resume.projects, [])
        self.assertEqual(
            resume.work_experience[0].responsibilities,
            ["Owned the project roadmap for the payments team"],
        )

    def test_labelled_bullets_stay_with_their_job(self):
        text = (
            "EXPERIENCE\n"
            "Acme Corp - Engineer 2019-2022\n"
            "• Key project: migrated billing to AWS\n"
            "• Technologies: React, Node\n"
            "• Reduced latency across the payments API\n"
            "• Mentored four junior engineers on the team\n"
        )
        resume = parse_resume_text(text)

        self.assertEqual(resume.projects, [])
        self.assertNotIn("Mentored four junior engineers on the team", resume.skills)
        self.assertEqual(
            resume.work_experience[0].responsibilities,
            [
                "Key project: migrated billing to AWS",
                "Technologies: React, Node",
                "Reduced latency across the payments API",
                "Mentored four junior engineers on the team",
            ],
        )

    def test_projects_and_certifications(self):
        text = (
            "PROJECTS\n"
            "• Budget Tracker - personal finance app built with React and Node\n"
            "CERTIFICATIONS\n"
            "AWS Certified Solutions Architect\n"
            "CKA\n"
        )
        resume = parse_resume_text(text)

        self.assertEqual(len(resume.projects), 1)
        project = resume.projects[0]
        self.assertEqual(project.name, "Budget Tracker")
        self.assertEqual(project.technologies, ["react", "node"])
        self.assertEqual(resume.certifications, ["AWS Certified Solutions Architect"])

    def test_parsed_resume_is_frozen(self):
        resume = parse_resume_text(SAMPLE_RESUME)
        with self.assertRaises(Exception):
            resume.name = "Someone Else"

    def test_parsed_resume_validator_dedupes_skills(self):
        resume = ParsedResume(skills=["Go", "go", "Go"])
        self.assertEqual(resume.skills, ["Go", "go"])


class WorkExperienceTests(unittest.TestCase):
    def test_date_line_before_title_is_attached_to_next_job(self):
        text = "EXPERIENCE\nJan 2020 - Present\nGlobex | Senior Engineer\n- Led a team of five engineers\n"
        resume = parse_resume_text(text)

        self.assertEqual(len(resume.work_experience), 1)
        job = resume.work_experience[0]
        self.assertEqual(job.company, "Globex")
        self.assertEqual(job.position, "Senior Engineer")
        self.assertEqual(job.duration, "Jan 2020 - Present")
        self.assertEqual(job.responsibilities, ["Led a team of five engineers"])

    def test_jobs_without_a_separator_get_default_position(self):
        job = parse_job_header("Initech 2015")
        self.assertEqual(job["company"], "Initech 2015")
        self.assertEqual(job["position"], "Position")

    def test_duration_with_present(self):
        self.assertEqual(extract_duration("Acme | 2021 - Present"), "2021 - Present")
        self.assertEqual(extract_duration("No dates here"), "")

    def test_two_jobs_in_one_section(self):
        text = (
            "WORK HISTORY\n"
            "Acme - Engineer 2019-2022\n"
            "Designed internal APIs for the billing platform\n"
            "Globex - Intern 2018\n"
        )
        resume = parse_resume_text(text)
        self.assertEqual([job.company for job in resume.work_experience], ["Acme", "Globex"])
        self.assertEqual(
            resume.work_experience[0].responsibilities,
            ["Designed internal APIs for the billing platform"],
        )


class ContactAndEducationTests(unittest.TestCase):
    def test_name_skips_contact_lines(self):
        self.assertEqual(extract_name("jane@x.com\n555-123-4567\nJane Doe"), "Jane Doe")
        self.assertEqual(extract_name("My Resume\nAbc"), NAME_NOT_FOUND)

    def test_short_degree_abbreviations_need_whole_words(self):
        self.assertEqual(extract_degree("Distributed Systems coursework"), "Degree")
        self.assertEqual(extract_degree("MS in Data Science"), "Ms")
        self.assertEqual(extract_degree("Masters of Engineering"), "Master")

    def test_build_education_reads_gpa(self):
        education = build_education("State University, BSc Economics, 2017, GPA: 3.8")
        self.assertEqual(education.institution, "State University")
        self.assertEqual(education.gpa, "3.8")
        self.assertEqual(education.field, "economics")


if __name__ == "__main__":
    unittest.main()
