"""
Multi-cluster searcher: ranks scheduler clusters for a requesting client.
"""

from multicluster_searcher.searcher.searcher import (
    Searcher,
    DefaultSearcher,
    new_searcher,
    get_searcher,
)
from multicluster_searcher.common.model import SchedulerCluster, Scheduler, SecurityGroup, SecurityRule, Scopes

__all__ = [
    "Searcher",
    "DefaultSearcher",
    "new_searcher",
    "get_searcher",
    "SchedulerCluster",
    "Scheduler",
    "SecurityGroup",
    "SecurityRule",
    "Scopes",
]
