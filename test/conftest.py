"""
Shared fixtures for the multicluster searcher tests.
"""

import pytest

from multicluster_searcher.common.model import (
    SchedulerCluster,
    Scheduler,
    SecurityGroup,
    SecurityRule,
    SCHEDULER_STATE_ACTIVE,
    SCHEDULER_STATE_INACTIVE,
)
from multicluster_searcher.searcher.searcher import reset_searcher


@pytest.fixture(autouse=True)
def _reset_process_searcher():
    reset_searcher()
    yield
    reset_searcher()


@pytest.fixture
def make_cluster():
    """Factory for scheduler clusters with one active scheduler by default."""

    def _make(name, is_default=False, scopes=None, domains=None, active=1, inactive=0):
        schedulers = [
            Scheduler(host_name=f"{name}-{i}", ip=f"192.168.0.{i + 1}", state=SCHEDULER_STATE_ACTIVE)
            for i in range(active)
        ]
        schedulers += [
            Scheduler(host_name=f"{name}-down-{i}", ip=f"192.168.1.{i + 1}", state=SCHEDULER_STATE_INACTIVE)
            for i in range(inactive)
        ]
        return SchedulerCluster(
            name=name,
            is_default=is_default,
            schedulers=schedulers,
            security_group=SecurityGroup(
                name=f"{name}-group",
                security_rules=[SecurityRule(domain=domain) for domain in (domains or [])],
            ),
            scopes=scopes,
        )

    return _make
