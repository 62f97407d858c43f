"""Unit tests for the doc-comment parser."""
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from glabcidoc.errors import FileUnreadable, MalformedJobLine
from glabcidoc.jobs import Job
from glabcidoc.parsers import parse_file, parse_jobs


class TestParseJobs(unittest.TestCase):
    """Tests for parse_jobs."""

    def test_documented_job(self):
        """A doc line right above a job documents it."""
        jobs = parse_jobs("#= Builds the app\nbuild:\n  script: make")

        self.assertEqual(jobs, [Job(name="build", documentation="Builds the app")])

    def test_undocumented_job(self):
        jobs = parse_jobs("build:\n  script: make\n")

        self.assertEqual(jobs, [Job(name="build", documentation=None)])

    def test_multiline_documentation_keeps_order(self):
        content = (
            "#= First line\n"
            "#= \n"
            "#= - a *list* item\n"
            "test:\n"
            "  script: pytest\n"
        )
        jobs = parse_jobs(content)

        self.assertEqual(jobs[0].documentation, "First line\n\n- a *list* item")

    def test_keyword_lines_discard_pending_documentation(self):
        """An orphan doc block is dropped by a global keyword line."""
        content = "default:\n#= orphan doc\nvariables:\n deploy:\n  script: x"

        self.assertEqual(parse_jobs(content), [])

    def test_keyword_between_doc_and_job(self):
        content = (
            "#= Not for the job\n"
            "stages:\n"
            "  - build\n"
            "build:\n"
            "  stage: build\n"
        )
        jobs = parse_jobs(content)

        self.assertEqual(jobs, [Job(name="build")])

    def test_ignored_lines_keep_pending_documentation(self):
        content = (
            "#= Deploys\n"
            "\n"
            "# plain comment\n"
            "---\n"
            "deploy:\n"
        )
        jobs = parse_jobs(content)

        self.assertEqual(jobs, [Job(name="deploy", documentation="Deploys")])

    def test_documentation_does_not_leak_to_next_job(self):
        content = "#= Builds\nbuild:\n  script: make\ntest:\n  script: make test\n"
        jobs = parse_jobs(content)

        self.assertEqual(
            jobs,
            [Job(name="build", documentation="Builds"), Job(name="test")],
        )

    def test_name_is_text_before_last_colon(self):
        jobs = parse_jobs("deploy:prod:\n  script: x\nlint: &lint\n")

        self.assertEqual(jobs[0].name, "deploy:prod")
        self.assertEqual(jobs[1].name, "lint")

    def test_hidden_job_with_anchor(self):
        jobs = parse_jobs("#= Shared setup\n.setup: &setup\n  before_script: []\n")

        self.assertEqual(jobs, [Job(name=".setup", documentation="Shared setup")])

    def test_line_without_colon_is_malformed(self):
        with self.assertRaises(MalformedJobLine) as cm:
            parse_jobs("build:\nfoo\n")

        self.assertEqual(cm.exception.line, "foo")
        self.assertIn("`foo`", str(cm.exception))

    def test_keyword_line_without_colon_is_not_malformed(self):
        self.assertEqual(parse_jobs("include\n"), [])

    def test_lone_empty_doc_line_is_no_documentation(self):
        jobs = parse_jobs("#= \nbuild:\n")

        self.assertIsNone(jobs[0].documentation)

    def test_trailing_doc_block_is_discarded(self):
        self.assertEqual(parse_jobs("build:\n#= dangling\n"), [Job(name="build")])

    def test_crlf_line_endings(self):
        jobs = parse_jobs("#= Builds\r\nbuild:\r\n  script: make\r\n")

        self.assertEqual(jobs, [Job(name="build", documentation="Builds")])

    def test_custom_global_keywords(self):
        content = "#= orphan\ncache:\n  paths: []\nbuild:\n"
        jobs = parse_jobs(content, global_keywords=("cache",))

        self.assertEqual(jobs, [Job(name="build")])

    def test_empty_document(self):
        self.assertEqual(parse_jobs(""), [])


class TestParseFile(unittest.TestCase):
    """Tests for parse_file."""

    def test_parse_file(self):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / ".gitlab-ci.yml"
            path.write_text("#= Runs tests\ntest:\n  script: pytest\n", encoding="utf-8")

            jobs = parse_file(path)

        self.assertEqual(jobs, [Job(name="test", documentation="Runs tests")])

    def test_malformed_line_reports_location(self):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "ci.yml"
            path.write_text("build:\nfoo\n", encoding="utf-8")

            with self.assertRaises(MalformedJobLine) as cm:
                parse_file(path)

        self.assertEqual(cm.exception.line, "foo")
        self.assertEqual(cm.exception.location, f"{path}:2")

    def test_missing_file(self):
        with TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "missing.yml")

            with self.assertRaises(FileUnreadable) as cm:
                parse_file(path)

        self.assertEqual(cm.exception.path, path)
        self.assertIsInstance(cm.exception.__cause__, OSError)


if __name__ == "__main__":
    unittest.main()
