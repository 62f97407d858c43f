from glabcidoc.discovery.aggregator import (
    JobAggregator,
    merge_and_filter,
    merge_jobs,
    select_jobs,
    warn_undocumented,
)

__all__ = [
    "JobAggregator",
    "merge_and_filter",
    "merge_jobs",
    "select_jobs",
    "warn_undocumented",
]
