"""
Decoding of raw cluster scopes into typed Scopes records.
"""

from collections.abc import Mapping
from typing import Any

from multicluster_searcher.common.exception import ScopesDecodeError
from multicluster_searcher.common.model import Scopes


def decode_scopes(raw: Any, cluster_name: str = "") -> Scopes:
    """
    Decode a cluster's raw scopes.

    None decodes to empty scopes and unknown keys are ignored.

    Raises:
        ScopesDecodeError: raw is not a mapping or a field has the wrong type
    """
    if raw is None:
        return Scopes()

    if isinstance(raw, Scopes):
        return raw

    if not isinstance(raw, Mapping):
        raise ScopesDecodeError(cluster_name, f"expected a mapping, got {type(raw).__name__}")

    idc = _decode_str(raw, "idc", cluster_name)
    location = _decode_str(raw, "location", cluster_name)

    cidrs = raw.get("cidrs")
    if cidrs is None:
        cidrs = []
    elif not isinstance(cidrs, (list, tuple)):
        raise ScopesDecodeError(cluster_name, f"'cidrs' expected a list, got {type(cidrs).__name__}")

    for cidr in cidrs:
        if not isinstance(cidr, str):
            raise ScopesDecodeError(cluster_name, f"'cidrs' element expected a string, got {type(cidr).__name__}")

    return Scopes(idc=idc, location=location, cidrs=list(cidrs))


def _decode_str(raw: Mapping, key: str, cluster_name: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""

    if not isinstance(value, str):
        raise ScopesDecodeError(cluster_name, f"'{key}' expected a string, got {type(value).__name__}")

    return value
