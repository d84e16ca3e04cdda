"""
Scheduler cluster file loading for the multicluster searcher.
"""

import os
import yaml
from typing import List, Dict, Any, Optional
from pathlib import Path

from multicluster_searcher.common.config import settings
from multicluster_searcher.common.exception import ConfigurationError
from multicluster_searcher.common.logging import get_logger
from multicluster_searcher.common.model import (
    SchedulerCluster,
    Scheduler,
    SecurityGroup,
    SecurityRule,
    SCHEDULER_STATE_ACTIVE,
)

logger = get_logger(__name__)


class ClusterConfigManager:
    """Loads scheduler clusters from a YAML file."""

    def __init__(self, config_file_path: Optional[str] = None):
        """
        Initialize the cluster config manager.

        Args:
            config_file_path (str, optional): Path to the scheduler cluster YAML file.
                If not provided, the file is looked up from CLUSTER_CONFIG_FILE and
                then in common locations.
        """
        self.config_file_path = config_file_path

    def _find_config_file(self) -> Optional[str]:
        """Find the scheduler cluster file."""
        if self.config_file_path:
            return self.config_file_path

        config_file = os.environ.get("CLUSTER_CONFIG_FILE") or settings.CLUSTER_CONFIG_FILE
        if config_file:
            return config_file

        possible_paths = [
            Path.cwd() / "clusters.yaml",
            Path.home() / ".multicluster_searcher" / "clusters.yaml",
            Path("/etc/multicluster_searcher/clusters.yaml"),
        ]
        for path in possible_paths:
            if path.exists():
                return str(path)

        return None

    def get_scheduler_clusters(self) -> List[SchedulerCluster]:
        """Load scheduler clusters from the YAML file."""
        config_file = self._find_config_file()
        if not config_file or not os.path.exists(config_file):
            raise ConfigurationError(f"Scheduler cluster file {config_file} not found")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading scheduler clusters from {config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError(f"Scheduler cluster file {config_file} must hold a mapping")

        clusters = []
        for cluster_data in config.get('scheduler_clusters') or []:
            clusters.append(parse_scheduler_cluster(cluster_data))

        logger.info(f"Loaded {len(clusters)} scheduler clusters from {config_file}")
        return clusters


def parse_scheduler_cluster(cluster_data: Dict[str, Any]) -> SchedulerCluster:
    """Build a SchedulerCluster from its YAML mapping; scopes are kept raw."""
    if not isinstance(cluster_data, dict) or 'name' not in cluster_data:
        raise ConfigurationError(f"Scheduler cluster entry must be a mapping with a name: {cluster_data!r}")

    try:
        schedulers = [
            Scheduler(
                host_name=scheduler['host_name'],
                ip=scheduler['ip'],
                port=int(scheduler.get('port', 8002)),
                state=scheduler.get('state', SCHEDULER_STATE_ACTIVE),
                idc=scheduler.get('idc', ""),
                location=scheduler.get('location', ""),
            )
            for scheduler in cluster_data.get('schedulers') or []
        ]

        group_data = cluster_data.get('security_group') or {}
        security_group = SecurityGroup(
            name=group_data.get('name', ""),
            security_rules=[
                SecurityRule(
                    domain=rule['domain'],
                    name=rule.get('name', ""),
                    proxy_domain=rule.get('proxy_domain', ""),
                    description=rule.get('description', ""),
                )
                for rule in group_data.get('security_rules') or []
            ],
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid scheduler cluster {cluster_data.get('name')}: {e}") from e

    return SchedulerCluster(
        name=cluster_data['name'],
        id=cluster_data.get('id'),
        bio=cluster_data.get('bio', ""),
        is_default=bool(cluster_data.get('is_default', False)),
        schedulers=schedulers,
        security_group=security_group,
        scopes=cluster_data.get('scopes'),
        config=cluster_data.get('config') or {},
        client_config=cluster_data.get('client_config') or {},
    )
