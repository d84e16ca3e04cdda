"""
Condition filter: drops scheduler clusters a client may not use.
"""

from typing import Dict, List

from multicluster_searcher.common.model import SchedulerCluster
from multicluster_searcher.searcher.constants import CONDITION_SECURITY_DOMAIN


def filter_scheduler_clusters(conditions: Dict[str, str],
                              scheduler_clusters: List[SchedulerCluster]) -> List[SchedulerCluster]:
    """Filter the scheduler clusters that the client can use."""
    clusters = []
    security_domain = (conditions or {}).get(CONDITION_SECURITY_DOMAIN, "")
    for cluster in scheduler_clusters:
        # There are no active schedulers in the scheduler cluster
        if cluster.active_scheduler_count == 0:
            continue

        # Client has no security domain, matching all scheduler clusters
        if not security_domain:
            clusters.append(cluster)
            continue

        # Default scheduler cluster matches all clients
        if cluster.is_default:
            clusters.append(cluster)
            continue

        # Scheduler cluster without security rules matches all clients
        if not cluster.security_rules:
            clusters.append(cluster)
            continue

        if any(rule.domain.lower() == security_domain.lower() for rule in cluster.security_rules):
            clusters.append(cluster)

    return clusters
