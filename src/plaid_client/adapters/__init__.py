"""Adapters: concrete I/O behind the core contracts (httpx transport)."""

from plaid_client.adapters.transport import HttpxTransport

__all__ = ["HttpxTransport"]
