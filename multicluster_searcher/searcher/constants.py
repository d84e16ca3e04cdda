"""
Condition keys and affinity scoring constants.
"""

from dataclasses import dataclass, fields
import math


# Condition security domain key.
CONDITION_SECURITY_DOMAIN = "security_domain"

# Condition IDC key.
CONDITION_IDC = "idc"

# Condition location key.
CONDITION_LOCATION = "location"

# Separator of multi-element affinity values, e.g. "region|zone|rack".
AFFINITY_SEPARATOR = "|"

MAX_SCORE = 1.0
MIN_SCORE = 0.0

# Maximum number of location elements compared.
MAX_ELEMENT_LEN = 5


@dataclass(frozen=True)
class AffinityWeights:
    """Weights of the affinity sub-scores; they must sum to 1.0."""
    security_domain: float = 0.4
    cidr: float = 0.3
    idc: float = 0.15
    location: float = 0.1
    cluster_type: float = 0.05

    def __post_init__(self):
        values = [getattr(self, f.name) for f in fields(self)]
        if any(value < 0 for value in values):
            raise ValueError(f"affinity weights must not be negative: {self}")
        if not math.isclose(sum(values), 1.0, abs_tol=1e-9):
            raise ValueError(f"affinity weights must sum to 1.0, got {sum(values)}")


DEFAULT_AFFINITY_WEIGHTS = AffinityWeights()
