# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Asyncio DNS resolver used by the connectivity prober.

Lives in ``netswitch.clients`` so that nodes never import ``socket``
directly; the prober receives it through ``ProtocolHostResolver``.
"""

from __future__ import annotations

import asyncio
import socket


class AsyncioHostResolver:
    """Resolve host names with the running loop's ``getaddrinfo``.

    Example:
        ```python
        resolver = AsyncioHostResolver()
        addresses = await resolver.resolve("dns.google")
        ```
    """

    def __init__(self, port: int = 443) -> None:
        self._port = port

    async def resolve(self, host: str) -> list[str]:
        """Return the unique addresses for ``host``.

        Raises:
            OSError: If the name cannot be resolved (``socket.gaierror``).
        """
        loop = asyncio.get_running_loop()
        infos = await loop.getaddrinfo(
            host, self._port, type=socket.SOCK_STREAM, proto=socket.IPPROTO_TCP
        )
        addresses: list[str] = []
        for _family, _type, _proto, _canonname, sockaddr in infos:
            address = str(sockaddr[0])
            if address not in addresses:
                addresses.append(address)
        if not addresses:
            raise OSError(f"No addresses returned for {host}")
        return addresses


__all__ = ["AsyncioHostResolver"]
