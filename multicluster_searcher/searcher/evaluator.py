"""
Affinity evaluation of a scheduler cluster against a client.

Each sub-score lies in [0.0, 1.0] and larger is better; the combined score is
their weighted sum.
"""

from typing import Dict, List, Optional

from multicluster_searcher.common.model import SchedulerCluster, Scopes, SecurityRule
from multicluster_searcher.common.logging import get_logger
from multicluster_searcher.searcher.cidr_ranger import CIDRRanger, build_cidr_ranger
from multicluster_searcher.searcher.constants import (
    AFFINITY_SEPARATOR,
    CONDITION_IDC,
    CONDITION_LOCATION,
    CONDITION_SECURITY_DOMAIN,
    DEFAULT_AFFINITY_WEIGHTS,
    MAX_ELEMENT_LEN,
    MAX_SCORE,
    MIN_SCORE,
    AffinityWeights,
)

logger = get_logger(__name__)


def evaluate(ip: str, hostname: str, conditions: Dict[str, str], scopes: Scopes,
             cluster: SchedulerCluster, weights: AffinityWeights = DEFAULT_AFFINITY_WEIGHTS,
             ranger: Optional[CIDRRanger] = None) -> float:
    """
    Evaluate the degree of matching between a scheduler cluster and a client.

    Args:
        ip: client IP
        hostname: client hostname, unused by the built-in scoring
        conditions: client conditions
        scopes: decoded scopes of the cluster
        cluster: the scheduler cluster
        weights: sub-score weights
        ranger: prebuilt ranger for scopes.cidrs, built on demand if omitted

    Returns:
        float: combined score in [0.0, 1.0]
    """
    conditions = conditions or {}
    if ranger is None:
        ranger = build_cidr_ranger(scopes.cidrs)

    return (
        weights.security_domain * calculate_security_domain_affinity_score(
            conditions.get(CONDITION_SECURITY_DOMAIN, ""), cluster.security_rules)
        + weights.cidr * calculate_ranger_affinity_score(ip, ranger)
        + weights.idc * calculate_idc_affinity_score(conditions.get(CONDITION_IDC, ""), scopes.idc)
        + weights.location * calculate_multi_element_affinity_score(
            conditions.get(CONDITION_LOCATION, ""), scopes.location)
        + weights.cluster_type * calculate_cluster_type_score(cluster)
    )


def calculate_security_domain_affinity_score(security_domain: str, security_rules: List[SecurityRule]) -> float:
    """Max score when the client declared a domain and the cluster has rules to check it against."""
    if not security_domain:
        return MIN_SCORE

    if not security_rules:
        return MIN_SCORE

    return MAX_SCORE


def calculate_cidr_affinity_score(ip: str, cidrs: List[str]) -> float:
    """Max score when ip is inside one of cidrs; unparsable entries are skipped."""
    return calculate_ranger_affinity_score(ip, build_cidr_ranger(cidrs))


def calculate_ranger_affinity_score(ip: str, ranger: CIDRRanger) -> float:
    if not ip:
        return MIN_SCORE

    try:
        contains = ranger.contains(ip)
    except ValueError as e:
        logger.error(f"Invalid client IP {ip!r}: {e}")
        return MIN_SCORE

    if not contains:
        return MIN_SCORE

    return MAX_SCORE


def calculate_idc_affinity_score(dst: str, src: str) -> float:
    """
    Dst has a single IDC, src may hold alternatives separated by "|".
    Max score when dst matches src or one of its alternatives.
    """
    if not dst or not src:
        return MIN_SCORE

    if dst.lower() == src.lower():
        return MAX_SCORE

    for element in src.split(AFFINITY_SEPARATOR):
        if dst.lower() == element.lower():
            return MAX_SCORE

    return MIN_SCORE


def calculate_multi_element_affinity_score(dst: str, src: str) -> float:
    """
    Score of the matching prefix of two "|" separated paths, coarse to fine,
    e.g. "r1|z1|rack1" against "r1|z1|rack2" matches two of five elements.
    """
    if not dst or not src:
        return MIN_SCORE

    if dst.lower() == src.lower():
        return MAX_SCORE

    dst_elements = dst.split(AFFINITY_SEPARATOR)
    src_elements = src.split(AFFINITY_SEPARATOR)
    element_len = min(len(dst_elements), len(src_elements), MAX_ELEMENT_LEN)

    score = 0
    for i in range(element_len):
        if dst_elements[i].lower() != src_elements[i].lower():
            break
        score += 1

    return score / MAX_ELEMENT_LEN


def calculate_cluster_type_score(cluster: SchedulerCluster) -> float:
    if cluster.is_default:
        return MAX_SCORE

    return MIN_SCORE
