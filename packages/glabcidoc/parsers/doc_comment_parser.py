"""Doc-comment parser for GitLab CI configuration files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from glabcidoc.config import GLOBAL_KEYWORDS
from glabcidoc.errors import FileUnreadable, MalformedJobLine
from glabcidoc.jobs import Job

logger = logging.getLogger(__name__)

DOC_MARKER = "#= "
DOCUMENT_SEPARATOR = "---"


def _is_ignored(line: str) -> bool:
    # Blank lines, document separators, nested content and plain comments
    return (
        not line
        or line == DOCUMENT_SEPARATOR
        or line.startswith(" ")
        or line.startswith("#")
    )


def _split_lines(content: str) -> List[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_jobs(
    content: str,
    global_keywords: Iterable[str] = GLOBAL_KEYWORDS,
    source: Optional[str] = None,
) -> List[Job]:
    """Parse the jobs defined in one CI configuration document.

    Doc lines accumulate in a pending block. A job line takes the whole block
    as its documentation and a global keyword line discards it. Blank lines,
    plain comments, separators and indented lines leave it untouched.

    Args:
        content: Text of the configuration document.
        global_keywords: Top-level keys that are not jobs.
        source: Name used to locate errors (usually the file path).

    Returns:
        Jobs in the order they are defined.

    Raises:
        MalformedJobLine: If a job line contains no colon.
    """
    keywords = tuple(global_keywords)
    jobs: List[Job] = []
    doc_block: List[str] = []

    for lineno, line in enumerate(_split_lines(content), start=1):
        if line.startswith(DOC_MARKER):
            doc_block.append(line[len(DOC_MARKER):])
        elif _is_ignored(line):
            continue
        elif line.startswith(keywords):
            if doc_block:
                logger.debug("Discarding doc block before global keyword line %r", line)
            doc_block.clear()
        else:
            name, colon, _ = line.rpartition(":")
            if not colon:
                location = f"{source}:{lineno}" if source else None
                raise MalformedJobLine(line, location)

            documentation = "\n".join(doc_block)
            doc_block.clear()

            job = Job(name=name, documentation=documentation or None)
            logger.debug("Discovered job: %s (documented: %s)", job.name, job.is_documented())
            jobs.append(job)

    if doc_block:
        logger.debug("Discarding trailing doc block of %d line(s)", len(doc_block))

    return jobs


def parse_file(
    path: Union[str, Path],
    global_keywords: Iterable[str] = GLOBAL_KEYWORDS,
) -> List[Job]:
    """Read a CI configuration file and parse its jobs.

    Raises:
        FileUnreadable: If the file cannot be read or decoded as UTF-8.
        MalformedJobLine: If a job line contains no colon.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadable(str(file_path), str(e)) from e

    logger.debug("Parsing %s", file_path)
    return parse_jobs(content, global_keywords, source=str(file_path))
