"""API client modules for PubMed Articles MCP Server."""

from .base import BaseClient
from .eutilities import EUtilitiesClient

__all__ = [
    "BaseClient",
    "EUtilitiesClient",
]
