"""Job records discovered in GitLab CI configuration files.

A job is any top-level entry of a CI document that is not one of the global
keywords. Its documentation is the block of `#= ` comment lines written right
above its definition line.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Job:
    """A job discovered in a CI configuration file.

    Attributes:
        name: Job identifier, the text before the last colon of its line.
        documentation: Newline-joined doc-comment lines, or None when the job
            is undocumented.
    """
    name: str
    documentation: Optional[str] = None

    def is_hidden(self) -> bool:
        """Hidden jobs (templates) have a name starting with a dot."""
        return self.name.startswith(".")

    def is_documented(self) -> bool:
        return self.documentation is not None
