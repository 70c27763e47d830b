"""Settings do wacloud."""

from __future__ import annotations

from wacloud.config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    CloudApiSettings,
    get_cloud_api_settings,
)

__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "CloudApiSettings",
    "get_cloud_api_settings",
]
