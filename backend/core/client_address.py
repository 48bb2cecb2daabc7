"""Client address resolution behind trusted reverse proxies.

The forwarded chain is read from the socket peer outward: ``REMOTE_ADDR``
first, then the ``X-Forwarded-For`` entries from right to left.  Hops are
followed while they sit in a trusted network; the first untrusted hop is the
client.
"""
from __future__ import annotations

import ipaddress
from typing import Iterable, List, Mapping, Optional, Tuple, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

UNIQUE_LOCAL_NETWORKS: Tuple[str, ...] = (
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
    "fc00::/7",
)

# Owned by the City of Seattle, stable enough as a default location.
FALLBACK_ADDRESS = "156.74.181.208"


def parse_address(value: str) -> Optional[IPAddress]:
    try:
        address = ipaddress.ip_address(value.strip())
    except ValueError:
        return None
    if isinstance(address, ipaddress.IPv6Address):
        if address.ipv4_mapped is not None:
            return address.ipv4_mapped
        if address.scope_id is not None:
            # zone ids are local to the host and meaningless upstream
            return ipaddress.IPv6Address(address.packed)
    return address


class TrustPolicy:
    """Immutable set of networks whose forwarding headers are trusted."""

    def __init__(self, networks: Iterable[str] = UNIQUE_LOCAL_NETWORKS) -> None:
        self._networks: Tuple[IPNetwork, ...] = tuple(
            ipaddress.ip_network(network, strict=False) for network in networks
        )

    @classmethod
    def unique_local(cls) -> "TrustPolicy":
        return cls(UNIQUE_LOCAL_NETWORKS)

    def trusts(self, address: str) -> bool:
        parsed = parse_address(address)
        if parsed is None:
            return False
        return any(parsed.version == net.version and parsed in net for net in self._networks)

    def __repr__(self) -> str:
        return f"TrustPolicy({[str(net) for net in self._networks]!r})"


def forwarded_chain(meta: Mapping[str, str]) -> List[str]:
    """Return ``[REMOTE_ADDR, *reversed(X-Forwarded-For)]`` without blanks."""
    remote = (meta.get("REMOTE_ADDR") or "").strip()
    if not remote:
        return []
    header = meta.get("HTTP_X_FORWARDED_FOR") or ""
    forwarded = [hop.strip() for hop in header.split(",") if hop.strip()]
    return [remote, *reversed(forwarded)]


def client_address(meta: Mapping[str, str], policy: TrustPolicy) -> Optional[str]:
    """Return the first untrusted hop of the forwarded chain, if any."""
    chain = forwarded_chain(meta)
    if not chain:
        return None
    selected = chain[-1]
    for hop in chain:
        if not policy.trusts(hop):
            selected = hop
            break
    parsed = parse_address(selected)
    if parsed is None:
        return None
    return str(parsed)


__all__ = [
    "FALLBACK_ADDRESS",
    "TrustPolicy",
    "UNIQUE_LOCAL_NETWORKS",
    "client_address",
    "forwarded_chain",
    "parse_address",
]
