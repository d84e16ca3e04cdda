"""
Main entry point for the multicluster searcher.
"""

import argparse
import sys
from typing import Dict, List, Optional

from multicluster_searcher.common.config import settings
from multicluster_searcher.common.exception import SearcherError
from multicluster_searcher.common.logging import configure_logging, get_logger
from multicluster_searcher.control_plane.config import ClusterConfigManager
from multicluster_searcher.searcher.ranker import rank_cluster_scores, score_scheduler_clusters
from multicluster_searcher.searcher.searcher import DefaultSearcher, get_searcher

logger = get_logger(__name__)


def parse_conditions(items: List[str]) -> Dict[str, str]:
    """Parse repeated key=value condition arguments."""
    conditions = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"condition {item!r} is not key=value")
        conditions[key.strip()] = value.strip()
    return conditions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multicluster-searcher",
        description="Rank scheduler clusters for a client",
    )
    parser.add_argument("--clusters", help="YAML file with scheduler_clusters")
    parser.add_argument("--ip", default="", help="client IP")
    parser.add_argument("--hostname", default="", help="client hostname")
    parser.add_argument("--condition", action="append", default=[], metavar="KEY=VALUE",
                        help="client condition, e.g. security_domain=prod, idc=sh, location=cn|sh")
    parser.add_argument("--plugin-dir", help="directory holding the searcher plugin")
    parser.add_argument("--settings", help="settings YAML file")
    parser.add_argument("--log-level", help="logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the searcher CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.settings:
        settings.load(args.settings)
    configure_logging(args.log_level or settings.LOG_LEVEL)

    try:
        conditions = parse_conditions(args.condition)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        clusters = ClusterConfigManager(args.clusters).get_scheduler_clusters()
        searcher = get_searcher(args.plugin_dir)
        ranked = searcher.find_scheduler_clusters(clusters, args.ip, args.hostname, conditions)
    except SearcherError as e:
        logger.error(f"Search failed: {e}")
        return 1

    if isinstance(searcher, DefaultSearcher):
        scores = rank_cluster_scores(
            score_scheduler_clusters(ranked, args.ip, args.hostname, conditions, searcher.weights))
        for item in scores:
            score = "-" if item.score is None else f"{item.score:.4f}"
            print(f"{item.cluster.name}\t{score}")
    else:
        for cluster in ranked:
            print(cluster.name)

    return 0


if __name__ == "__main__":
    sys.exit(main())
