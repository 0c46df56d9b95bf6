"""Get the current computer's IP addresses.

Walks every network interface that is up, skips loopback addresses, and
reports all remaining IPv4/IPv6 addresses plus a primary address: the first
IPv4 address found, or the first address of any family when there is no IPv4.
"""

import asyncio
import ipaddress
import logging
import socket

import psutil
from pydantic import BaseModel, Field

from mcp_devtools.errors import EmptyResultError, ExternalResourceError
from mcp_devtools.registry import Tool

logger = logging.getLogger(__name__)


class IPAddressOutput(BaseModel):
    addresses: list[str] = Field(description="List of IP addresses")
    primary: str = Field(description="Primary IP address (first non-loopback IPv4)")


tool = Tool(
    name="get_ip_address",
    description=(
        "Get the current computer's IP addresses, including all network interfaces and the primary IP address"
    ),
)


def collect_addresses() -> list[ipaddress.IPv4Address | ipaddress.IPv6Address]:
    """Return non-loopback addresses of interfaces that are up, in interface order."""
    try:
        if_addrs = psutil.net_if_addrs()
        if_stats = psutil.net_if_stats()
    except OSError as e:
        raise ExternalResourceError(f"failed to get network interfaces: {e}") from e

    found = []
    for name, entries in if_addrs.items():
        stats = if_stats.get(name)
        if stats is None or not stats.isup:
            continue
        for entry in entries:
            if entry.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            # IPv6 link-local addresses carry a %zone suffix
            raw = entry.address.split("%", 1)[0]
            try:
                ip = ipaddress.ip_address(raw)
            except ValueError:
                logger.debug("skipping unparseable address %r on %s", entry.address, name)
                continue
            if ip.is_loopback:
                continue
            found.append(ip)
    return found


def pick_primary(addresses: list[ipaddress.IPv4Address | ipaddress.IPv6Address]) -> str:
    for ip in addresses:
        if ip.version == 4:
            return str(ip)
    return str(addresses[0])


@tool.handler
async def run(params) -> IPAddressOutput:
    addresses = await asyncio.to_thread(collect_addresses)
    if not addresses:
        raise EmptyResultError("no IP addresses found")
    return IPAddressOutput(addresses=[str(ip) for ip in addresses], primary=pick_primary(addresses))
