import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.matching.sections import bucketize_jd, classify_header, extract_skills_block  # noqa: E402


class BucketizeTests(unittest.TestCase):
    def test_inline_header_content_goes_to_its_bucket(self):
        buckets = bucketize_jd("Requirements: Python, SQL, AWS\nPreferred: Docker")
        self.assertEqual(buckets.required, "Python, SQL, AWS")
        self.assertEqual(buckets.preferred, "Docker")
        self.assertEqual(buckets.other, "")

    def test_header_lines_switch_state_and_are_consumed(self):
        jd = (
            "Acme Corp builds tools\n"
            "\n"
            "What you need\n"
            "- Python\n"
            "- Kafka\n"
            "Nice to have\n"
            "- Go\n"
        )
        buckets = bucketize_jd(jd)
        self.assertEqual(buckets.other, "Acme Corp builds tools")
        self.assertEqual(buckets.required, "- Python\n- Kafka")
        self.assertEqual(buckets.preferred, "- Go")

    def test_required_cue_is_checked_first(self):
        self.assertEqual(classify_header("Preferred Qualifications"), "required")
        self.assertEqual(classify_header("Nice to have"), "preferred")
        self.assertEqual(classify_header("Must-have qualifications"), "required")
        self.assertIsNone(classify_header("Build APIs in Go"))

    def test_requirements_line_mentioning_a_plus_stays_required(self):
        buckets = bucketize_jd("Requirements: Python, Go (Kubernetes a plus)\n- Terraform")
        self.assertEqual(buckets.required, "Python, Go (Kubernetes a plus)\n- Terraform")
        self.assertEqual(buckets.preferred, "")
        self.assertEqual(buckets.other, "")

    def test_preferred_cues_match_whole_words_only(self):
        self.assertIsNone(classify_header("Manage the surplus inventory"))
        self.assertIsNone(classify_header("Track bonuses for the sales team"))
        self.assertEqual(classify_header("Bonus points:"), "preferred")
        self.assertEqual(classify_header("Go experience is a plus"), "preferred")

    def test_headerless_text_is_all_other(self):
        buckets = bucketize_jd("We build APIs.\nYou ship Go services.")
        self.assertEqual(buckets.required, "")
        self.assertEqual(buckets.preferred, "")
        self.assertEqual(buckets.other, "We build APIs.\nYou ship Go services.")

    def test_empty_input(self):
        buckets = bucketize_jd("")
        self.assertEqual((buckets.required, buckets.preferred, buckets.other), ("", "", ""))


class SkillsBlockTests(unittest.TestCase):
    def test_collects_until_bold_heading(self):
        resume = "Jane Doe\nSkills\n- Python\n- Docker, Kubernetes\n**Experience**\n- Built APIs with Go"
        self.assertEqual(extract_skills_block(resume), "Python Docker, Kubernetes")

    def test_inline_content_and_section_heading_stop(self):
        resume = "Technical Skills: Python, SQL\nEducation\nBSc Computer Science"
        self.assertEqual(extract_skills_block(resume), "Python, SQL")

    def test_markdown_headings(self):
        resume = "## Skills\n* AWS\n## Experience\nGo"
        self.assertEqual(extract_skills_block(resume), "AWS")

    def test_common_resume_headings_end_the_block(self):
        for heading in ("Work History", "Technical Experience", "PROFESSIONAL SUMMARY", "Volunteer Experience:"):
            resume = f"Skills\n- Python\n{heading}\nLed Kafka migration"
            self.assertEqual(extract_skills_block(resume), "Python", heading)

    def test_no_skills_heading(self):
        self.assertEqual(extract_skills_block("Python developer with SQL"), "")
        self.assertEqual(extract_skills_block(""), "")


if __name__ == "__main__":
    unittest.main()
