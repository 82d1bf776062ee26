# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Short-lived cache for the last resolved network identity.

Platforms tend to fire several callbacks for one network change
(available, capabilities-changed twice, link-properties...).  Caching the
identity for a few seconds lets all of them share one trip through the
fallback chain.  The cache is never a source of truth beyond that window.

Thread Safety:
    Only touched from the event loop that runs ``IdentityResolver``.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from netswitch.models.model_network_identity import ModelNetworkIdentity


class IdentityCache:
    """Holds at most one identity together with the time it was stored.

    Usage:
        cache = IdentityCache(ttl_seconds=3.0)
        identity = cache.get()
        if identity is None:
            identity = await resolve()
            cache.put(identity)
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._identity: ModelNetworkIdentity | None = None
        self._stored_at: float = 0.0

    def get(self) -> ModelNetworkIdentity | None:
        """Return the cached identity if it is younger than the TTL."""
        if self._identity is None:
            return None
        if self._clock() - self._stored_at >= self._ttl:
            self._identity = None
            return None
        return self._identity

    def put(self, identity: ModelNetworkIdentity) -> None:
        """Store ``identity``, replacing any previous entry."""
        if self._ttl <= 0:
            return
        self._identity = identity
        self._stored_at = self._clock()

    def invalidate(self) -> bool:
        """Drop the cached identity.

        Returns:
            True if an entry was dropped; False if the cache was empty.
        """
        had_entry = self._identity is not None
        self._identity = None
        return had_entry

    def peek(self) -> ModelNetworkIdentity | None:
        """Return the stored identity regardless of age.

        Used to compare an incoming event against the last known transport.
        """
        return self._identity


__all__ = ["IdentityCache"]
