"""Adaptadores de I/O: transporte HTTP, dispatcher y exportación."""

from quran_content.adapters.dispatcher import RequestDispatcher, unwrap_response
from quran_content.adapters.http_client import build_async_client

__all__ = [
    "RequestDispatcher",
    "build_async_client",
    "unwrap_response",
]
