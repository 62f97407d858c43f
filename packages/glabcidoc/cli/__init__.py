"""Command-line interface for glabcidoc."""
