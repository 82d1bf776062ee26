# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""URL resolution engine: classification + mode + endpoints -> one URL.

Pure, total function.  The result carries an ``EnumUrlKind`` tag so the
transition controller can detect internal/external mode switches without
inspecting URL text.
"""

from __future__ import annotations

import logging

from netswitch.enums.enum_connection_mode import EnumConnectionMode
from netswitch.enums.enum_url_kind import EnumUrlKind
from netswitch.models.model_endpoint_config import ModelEndpointConfig
from netswitch.models.model_resolved_url import ModelResolvedUrl

logger = logging.getLogger(__name__)


def select_url_kind(is_home: bool, mode: EnumConnectionMode) -> EnumUrlKind:
    """Return which endpoint side applies for ``mode`` and ``is_home``."""
    if mode is EnumConnectionMode.FORCE_INTERNAL:
        return EnumUrlKind.INTERNAL
    if mode is EnumConnectionMode.FORCE_EXTERNAL:
        return EnumUrlKind.EXTERNAL
    return EnumUrlKind.INTERNAL if is_home else EnumUrlKind.EXTERNAL


def resolve_url(
    is_home: bool,
    mode: EnumConnectionMode,
    endpoints: ModelEndpointConfig,
) -> ModelResolvedUrl:
    """Return the URL that should currently be active.

    Empty endpoint fields resolve to the built-in defaults; missing
    configuration is never fatal.
    """
    kind = select_url_kind(is_home, mode)
    if kind is EnumUrlKind.INTERNAL:
        configured = endpoints.internal_url
        url = endpoints.effective_internal_url()
    else:
        configured = endpoints.external_url
        url = endpoints.effective_external_url()

    if not configured.strip():
        logger.warning(
            "Endpoint not configured, using built-in default",
            extra={"url_kind": kind.value, "url": url},
        )

    return ModelResolvedUrl(url=url, kind=kind)


__all__ = ["resolve_url", "select_url_kind"]
