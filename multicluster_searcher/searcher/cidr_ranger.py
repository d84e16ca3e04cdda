"""
CIDR ranger: answers whether an IP falls inside any of a set of CIDR ranges.
"""

import ipaddress
from typing import Iterable, List, Union

from multicluster_searcher.common.exception import InvalidCIDRError
from multicluster_searcher.common.logging import get_logger

logger = get_logger(__name__)

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


class CIDRRanger:
    """Range-membership index over IPv4 and IPv6 networks."""

    def __init__(self):
        self._networks: dict = {4: [], 6: []}

    def __len__(self) -> int:
        return len(self._networks[4]) + len(self._networks[6])

    def insert(self, cidr: str) -> IPNetwork:
        """
        Parse and add a CIDR entry.

        Host bits are allowed and masked off ("10.0.0.5/24" is 10.0.0.0/24),
        but the prefix length is required.

        Raises:
            InvalidCIDRError: the entry is not a valid CIDR
        """
        if not isinstance(cidr, str) or "/" not in cidr:
            raise InvalidCIDRError(str(cidr), "missing prefix length")

        try:
            network = ipaddress.ip_network(cidr.strip(), strict=False)
        except ValueError as e:
            raise InvalidCIDRError(cidr, str(e)) from e

        self._networks[network.version].append(network)
        return network

    def contains(self, ip: str) -> bool:
        """
        Whether ip is inside any inserted network.

        Raises:
            ValueError: ip is not a valid address
        """
        address = ipaddress.ip_address(ip.strip())
        # IPv4-mapped IPv6 addresses such as ::ffff:10.0.0.5 match IPv4 networks.
        if address.version == 6 and address.ipv4_mapped is not None:
            address = address.ipv4_mapped
        return any(address in network for network in self._networks[address.version])

    def networks(self) -> List[IPNetwork]:
        return self._networks[4] + self._networks[6]


def build_cidr_ranger(cidrs: Iterable[str]) -> CIDRRanger:
    """Build a ranger from CIDR strings, skipping entries that do not parse."""
    ranger = CIDRRanger()
    for cidr in cidrs or []:
        try:
            ranger.insert(cidr)
        except InvalidCIDRError as e:
            logger.error(f"Skip CIDR entry: {e}")
            continue

    return ranger
