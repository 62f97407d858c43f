from __future__ import annotations


class GlabCiDocError(Exception):
    pass


class ConfigError(GlabCiDocError):
    pass


class MalformedJobLine(GlabCiDocError):
    """Raised when a job definition line has no colon."""

    def __init__(self, line: str, location: str | None = None):
        self.line = line
        self.location = location
        message = f"Expected a job definition: got `{line}`"
        if location:
            message = f"{location}: {message}"
        super().__init__(message)


class FileUnreadable(GlabCiDocError):
    """Raised when a configuration file cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")
