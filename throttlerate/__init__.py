"""throttlerate - normalized rate descriptors for client-side request throttles."""

__version__ = "0.1.0"
