#!/usr/bin/env python3
"""
Network related information modules.
"""

import socket
import ipaddress
import logging
from typing import Any, Dict

import psutil

from .base import InfoModule, UNKNOWN

logger = logging.getLogger("quickfetch.modules.network")


class NetworkModule(InfoModule):
    """Module for local network address information."""

    def __init__(self):
        super().__init__(
            "network",
            "Network"
        )

    def run(self) -> Dict[str, Any]:
        return {"local_ip": self.get_local_ip_info()}

    def get_local_ip_info(self) -> str:
        """Return the first non-loopback IPv4 address of any interface."""
        try:
            interfaces = psutil.net_if_addrs()
        except (psutil.Error, OSError) as e:
            logger.debug(f"Unable to list network interfaces: {str(e)}")
            return UNKNOWN

        for name, addresses in interfaces.items():
            for address in addresses:
                if address.family != socket.AF_INET:
                    continue
                try:
                    ip = ipaddress.IPv4Address(address.address)
                except ValueError:
                    logger.debug(f"Ignoring malformed address {address.address} on {name}")
                    continue
                if not ip.is_loopback:
                    return str(ip)

        return UNKNOWN
