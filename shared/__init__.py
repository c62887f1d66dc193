"""Shared helpers for the function app.

Keep configuration, the outbound clients and the stored record here so the
function folders stay thin and focused on I/O and bindings.
"""

__all__ = ["config", "models", "ipify", "cosmos_client", "openapi"]
