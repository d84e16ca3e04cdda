"""
Core data models for the multicluster searcher.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any


# Scheduler states.
SCHEDULER_STATE_ACTIVE = "active"
SCHEDULER_STATE_INACTIVE = "inactive"


@dataclass
class Scheduler:
    """A scheduler instance serving a scheduler cluster."""
    host_name: str
    ip: str
    port: int = 8002
    state: str = SCHEDULER_STATE_ACTIVE
    idc: str = ""
    location: str = ""

    @property
    def is_active(self) -> bool:
        return self.state == SCHEDULER_STATE_ACTIVE


@dataclass
class SecurityRule:
    """Security rule restricting which clients a cluster may serve."""
    domain: str
    name: str = ""
    proxy_domain: str = ""
    description: str = ""


@dataclass
class SecurityGroup:
    """Ordered set of security rules attached to a scheduler cluster."""
    name: str = ""
    security_rules: List[SecurityRule] = field(default_factory=list)


@dataclass
class Scopes:
    """Typed locality descriptor decoded from a cluster's raw scopes."""
    idc: str = ""
    location: str = ""
    cidrs: List[str] = field(default_factory=list)


@dataclass
class SchedulerCluster:
    """A deployable cluster of schedulers, as loaded by an external store."""
    name: str
    is_default: bool = False
    schedulers: List[Scheduler] = field(default_factory=list)
    security_group: SecurityGroup = field(default_factory=SecurityGroup)
    # Raw scopes as stored, decoded on demand (see searcher.scopes).
    scopes: Optional[Dict[str, Any]] = None
    id: Optional[int] = None
    bio: str = ""
    config: Dict[str, Any] = field(default_factory=dict)
    client_config: Dict[str, Any] = field(default_factory=dict)

    @property
    def active_scheduler_count(self) -> int:
        return sum(1 for scheduler in self.schedulers if scheduler.is_active)

    @property
    def security_rules(self) -> List[SecurityRule]:
        return self.security_group.security_rules
