"""GitLab CI documentation generator

This package extracts `#= ` documentation comments attached to job
definitions in GitLab CI configuration files and renders them as markdown.

Key Components:
- Line-oriented doc-comment parser
- Job aggregation with last-file-wins merging and filters
- Markdown generator backed by Jinja2 templates
- CLI for CI/CD integration
"""

__version__ = "0.1.0"
