"""Configuration for documentation generation runs."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from glabcidoc.errors import ConfigError

# Reserved top-level keys of a GitLab CI document that never define a job.
GLOBAL_KEYWORDS: Tuple[str, ...] = ("default", "include", "stages", "variables", "workflow")

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "n", "off"}


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse a boolish string such as `yes`, `off` or `1`.

    Args:
        value: Raw string, usually taken from the environment.
        name: Name reported in the error message.

    Returns:
        The parsed boolean.

    Raises:
        ConfigError: If the value is not a recognised boolean.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


@dataclass
class DocgenConfig:
    """Configuration for a documentation generation run.

    Attributes:
        only_hidden: Keep only hidden (template) jobs.
        only_documented: Keep only documented jobs.
        warn: Warn about undocumented jobs in the selected set.
        debug: Dump configuration and merged jobs while running.
        global_keywords: Top-level keys that reset pending documentation.
    """
    only_hidden: bool = False
    only_documented: bool = False
    warn: bool = True
    debug: bool = False
    global_keywords: Tuple[str, ...] = field(default=GLOBAL_KEYWORDS)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DocgenConfig":
        """Build a configuration from GLABCIDOC_* environment variables.

        GLABCIDOC_DEBUG toggles debug dumps and GLABCIDOC_GLOBAL_KEYWORDS is a
        comma-separated list of keywords added to the built-in ones. Keyword
        arguments override the environment.
        """
        if environ is None:
            environ = os.environ

        debug = parse_bool(environ.get("GLABCIDOC_DEBUG", ""), "GLABCIDOC_DEBUG")
        extra = [
            keyword.strip()
            for keyword in environ.get("GLABCIDOC_GLOBAL_KEYWORDS", "").split(",")
            if keyword.strip()
        ]

        config = cls(debug=debug, global_keywords=merge_keywords(GLOBAL_KEYWORDS, extra))
        for key, value in overrides.items():
            if not hasattr(config, key):
                raise ConfigError(f"Unknown configuration option: {key}")
            setattr(config, key, value)
        return config


def merge_keywords(base: Tuple[str, ...], extra) -> Tuple[str, ...]:
    """Append extra keywords to base, dropping duplicates and keeping order."""
    merged = list(base)
    for keyword in extra:
        if keyword not in merged:
            merged.append(keyword)
    return tuple(merged)
