"""Markdown generator.

Renders documented jobs to markdown from Jinja2 templates.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader

from glabcidoc.jobs import Job

logger = logging.getLogger(__name__)

JOB_SEPARATOR = "\n\n"


class MarkdownGenerator:
    """Generates a markdown document from jobs."""

    def __init__(self, template_dir: Optional[Path] = None, template_name: str = "job.md.j2"):
        """Initialize the generator.

        Args:
            template_dir: Directory containing Jinja2 templates.
                         Defaults to the templates/ directory in this package.
            template_name: Template rendered once per job.
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = template_dir
        self.template_name = template_name
        # Documentation is emitted verbatim, so no autoescaping.
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )

    def render_job(self, job: Job) -> str:
        """Render a single job section."""
        template = self.env.get_template(self.template_name)
        return template.render(job=job)

    def render(self, jobs: Iterable[Job]) -> str:
        """Render jobs in the given order, separated by a blank line."""
        sections = [self.render_job(job) for job in jobs]
        logger.debug("Rendered %d job section(s)", len(sections))
        return JOB_SEPARATOR.join(sections)


def render(jobs: Iterable[Job]) -> str:
    """Render jobs with the default templates."""
    return MarkdownGenerator().render(jobs)
