"""
Searcher: finds the scheduler clusters that best match a client.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from multicluster_searcher.common.config import settings
from multicluster_searcher.common.exception import (
    EmptySchedulerClustersError,
    NoMatchingSchedulerClusterError,
    PluginLoadError,
)
from multicluster_searcher.common.logging import get_logger
from multicluster_searcher.common.model import SchedulerCluster
from multicluster_searcher.searcher.constants import DEFAULT_AFFINITY_WEIGHTS, AffinityWeights
from multicluster_searcher.searcher.filter import filter_scheduler_clusters
from multicluster_searcher.searcher.ranker import rank_scheduler_clusters

logger = get_logger(__name__)


class Searcher(ABC):
    """Contract shared by the default searcher and searcher plugins."""

    @abstractmethod
    def find_scheduler_clusters(self, scheduler_clusters: List[SchedulerCluster], ip: str, hostname: str,
                                conditions: Dict[str, str]) -> List[SchedulerCluster]:
        """
        Find the scheduler clusters that best match the client, best first.

        Raises:
            EmptySchedulerClustersError: scheduler_clusters is empty
            NoMatchingSchedulerClusterError: no cluster passes the conditions
        """


class DefaultSearcher(Searcher):
    """Built-in searcher: condition filter followed by affinity ranking."""

    def __init__(self, weights: AffinityWeights = DEFAULT_AFFINITY_WEIGHTS):
        self.weights = weights

    def find_scheduler_clusters(self, scheduler_clusters: List[SchedulerCluster], ip: str, hostname: str,
                                conditions: Dict[str, str]) -> List[SchedulerCluster]:
        if not scheduler_clusters:
            raise EmptySchedulerClustersError()

        clusters = filter_scheduler_clusters(conditions, scheduler_clusters)
        if not clusters:
            raise NoMatchingSchedulerClusterError(conditions)

        return rank_scheduler_clusters(clusters, ip, hostname, conditions, self.weights)


def new_searcher(plugin_dir: Optional[str] = None) -> Searcher:
    """Load the searcher plugin from plugin_dir, falling back to the default searcher."""
    # Imported here, the plugin module validates against Searcher.
    from multicluster_searcher.searcher.plugin import load_plugin

    try:
        searcher = load_plugin(plugin_dir)
    except PluginLoadError as e:
        logger.info(f"use default searcher: {e}")
        return DefaultSearcher()

    logger.info("use searcher plugin")
    return searcher


_searcher: Optional[Searcher] = None
_searcher_lock = threading.Lock()


def get_searcher(plugin_dir: Optional[str] = None) -> Searcher:
    """
    Return the process-wide searcher, resolving it on first use.

    plugin_dir only matters on the first call and defaults to
    settings.PLUGIN_DIR; later calls return the same searcher.
    """
    global _searcher
    if _searcher is None:
        with _searcher_lock:
            if _searcher is None:
                _searcher = new_searcher(plugin_dir if plugin_dir is not None else settings.PLUGIN_DIR)
    return _searcher


def reset_searcher() -> None:
    """Forget the process-wide searcher. Only meant for tests."""
    global _searcher
    with _searcher_lock:
        _searcher = None
