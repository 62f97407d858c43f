from glabcidoc.generator.generator import JOB_SEPARATOR, MarkdownGenerator, render

__all__ = ["JOB_SEPARATOR", "MarkdownGenerator", "render"]
