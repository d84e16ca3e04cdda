"""
Ranking of scheduler clusters by descending affinity score.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Dict, List, Optional

from multicluster_searcher.common.exception import ScopesDecodeError
from multicluster_searcher.common.logging import get_logger
from multicluster_searcher.common.model import SchedulerCluster
from multicluster_searcher.searcher.cidr_ranger import build_cidr_ranger
from multicluster_searcher.searcher.constants import DEFAULT_AFFINITY_WEIGHTS, AffinityWeights
from multicluster_searcher.searcher.evaluator import evaluate
from multicluster_searcher.searcher.scopes import decode_scopes

logger = get_logger(__name__)


@dataclass
class ClusterScore:
    """A scheduler cluster with its combined score, None when its scopes failed to decode."""
    cluster: SchedulerCluster
    score: Optional[float]


def score_scheduler_clusters(scheduler_clusters: List[SchedulerCluster], ip: str, hostname: str,
                             conditions: Dict[str, str],
                             weights: AffinityWeights = DEFAULT_AFFINITY_WEIGHTS) -> List[ClusterScore]:
    """Score every cluster once, building one CIDR ranger per cluster scopes."""
    scores = []
    for cluster in scheduler_clusters:
        try:
            scopes = decode_scopes(cluster.scopes, cluster.name)
        except ScopesDecodeError as e:
            logger.error(str(e))
            scores.append(ClusterScore(cluster=cluster, score=None))
            continue

        score = evaluate(ip, hostname, conditions, scopes, cluster, weights,
                         ranger=build_cidr_ranger(scopes.cidrs))
        logger.debug(f"Scheduler cluster {cluster.name} scored {score:.4f} for client {ip} ({hostname})")
        scores.append(ClusterScore(cluster=cluster, score=score))

    return scores


def _compare_cluster_scores(left: ClusterScore, right: ClusterScore) -> int:
    if left.score > right.score:
        return -1

    if left.score < right.score:
        return 1

    return 0


def rank_cluster_scores(scores: List[ClusterScore]) -> List[ClusterScore]:
    """
    Sort by descending score; the sort is stable so ties keep input order.

    Clusters without a score keep their input index and the scored clusters
    are ranked around them.
    """
    ranked = iter(sorted((item for item in scores if item.score is not None),
                         key=cmp_to_key(_compare_cluster_scores)))
    return [item if item.score is None else next(ranked) for item in scores]


def rank_scheduler_clusters(scheduler_clusters: List[SchedulerCluster], ip: str, hostname: str,
                            conditions: Dict[str, str],
                            weights: AffinityWeights = DEFAULT_AFFINITY_WEIGHTS) -> List[SchedulerCluster]:
    """Order scheduler clusters from best to worst match."""
    scores = score_scheduler_clusters(scheduler_clusters, ip, hostname, conditions, weights)
    return [item.cluster for item in rank_cluster_scores(scores)]
