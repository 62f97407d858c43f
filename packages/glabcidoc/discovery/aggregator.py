"""Multi-file job aggregation for documentation generation.

Jobs parsed from several CI files are merged by name, later files overriding
earlier ones, and then filtered down to the set that gets documented.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from glabcidoc.config import DocgenConfig
from glabcidoc.jobs import Job

logger = logging.getLogger(__name__)


def merge_jobs(job_lists: Iterable[Iterable[Job]]) -> Dict[str, Job]:
    """Merge job lists by name; the last definition of a name wins.

    Args:
        job_lists: Job lists in file processing order.

    Returns:
        Dictionary mapping job names to jobs, in insertion order.
    """
    merged: Dict[str, Job] = {}
    for jobs in job_lists:
        for job in jobs:
            if job.name in merged:
                logger.debug("Job %s overridden by a later definition", job.name)
            merged[job.name] = job
    return merged


def select_jobs(
    jobs: Iterable[Job],
    only_hidden: bool = False,
    only_documented: bool = False,
) -> List[Job]:
    """Sort jobs by name and keep the ones matching every enabled filter."""
    selected = []
    for job in sorted(jobs, key=lambda j: j.name):
        if only_hidden and not job.is_hidden():
            continue
        if only_documented and not job.is_documented():
            continue
        selected.append(job)
    return selected


def merge_and_filter(
    job_lists: Iterable[Iterable[Job]],
    only_hidden: bool = False,
    only_documented: bool = False,
) -> List[Job]:
    """Merge job lists and return the selected jobs sorted by name."""
    merged = merge_jobs(job_lists)
    return select_jobs(merged.values(), only_hidden, only_documented)


def warn_undocumented(jobs: Iterable[Job]) -> None:
    """Emit a warning for every undocumented job."""
    for job in jobs:
        if not job.is_documented():
            logger.warning("Warning: `%s` is not documented", job.name)


class JobAggregator:
    """Collects jobs from several files and selects the ones to document."""

    def __init__(self, config: Optional[DocgenConfig] = None):
        """Initialize the aggregator.

        Args:
            config: Run configuration. Defaults to DocgenConfig().
        """
        self.config = config or DocgenConfig()
        self._jobs: Dict[str, Job] = {}

    def add(self, jobs: Iterable[Job]) -> None:
        """Merge the jobs of one file, overriding same-named jobs."""
        self._jobs = merge_jobs([self._jobs.values(), jobs])

    def merged(self) -> List[Job]:
        """Return every merged job sorted by name."""
        return sorted(self._jobs.values(), key=lambda j: j.name)

    def select(self) -> List[Job]:
        """Return the jobs matching the configured filters, sorted by name."""
        selected = select_jobs(
            self._jobs.values(),
            only_hidden=self.config.only_hidden,
            only_documented=self.config.only_documented,
        )
        logger.debug("Selected %d of %d job(s)", len(selected), len(self._jobs))
        return selected

    def warn_undocumented(self, jobs: Iterable[Job]) -> None:
        """Warn about undocumented jobs when warnings are enabled."""
        if self.config.warn:
            warn_undocumented(jobs)
