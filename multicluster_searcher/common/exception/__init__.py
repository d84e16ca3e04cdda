"""
Exception hierarchy for the multicluster searcher.
"""

from typing import Dict, Optional


class SearcherError(Exception):
    """Base exception for all searcher-related errors."""
    pass


class EmptySchedulerClustersError(SearcherError):
    """Raised when no candidate scheduler clusters were given."""

    def __init__(self, message: str = "empty scheduler clusters"):
        super().__init__(message)


class NoMatchingSchedulerClusterError(SearcherError):
    """Raised when the conditions filter out every candidate cluster."""

    def __init__(self, conditions: Optional[Dict[str, str]] = None):
        self.conditions = dict(conditions or {})
        super().__init__(f"conditions {self.conditions!r} does not match any scheduler cluster")


class ScopesDecodeError(SearcherError):
    """Raised when a cluster's raw scopes cannot be decoded."""

    def __init__(self, cluster_name: str, reason: str):
        self.cluster_name = cluster_name
        self.reason = reason
        super().__init__(f"cluster {cluster_name} decode scopes failed: {reason}")


class InvalidCIDRError(SearcherError):
    """Raised when a CIDR string cannot be parsed."""

    def __init__(self, cidr: str, reason: str = ""):
        self.cidr = cidr
        message = f"invalid CIDR {cidr!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PluginLoadError(SearcherError):
    """Raised when a searcher plugin cannot be loaded or validated."""
    pass


class ConfigurationError(SearcherError):
    """Raised when there is an error in searcher configuration."""
    pass
