"""Core contracts (Protocol) implemented by adapters."""

from plaid_client.core.interfaces.transport import Transport

__all__ = ["Transport"]
