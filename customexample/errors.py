"""
Custom Example errors - taxonomy of reconciliation failures.
"""


class CustomExampleError(Exception):
    """Base exception for all provider errors."""
    pass


class ConfigurationError(CustomExampleError):
    """A provider configuration value is unknown or missing."""
    pass


class RemoteStoreError(CustomExampleError):
    """A remote store call failed at a given stage."""

    def __init__(self, stage: str, message: str):
        super().__init__(message)
        self.stage = stage


class TransportError(RemoteStoreError):
    """The HTTP call could not be completed."""
    pass


class ProtocolError(RemoteStoreError):
    """The HTTP call completed with an unexpected status code."""

    def __init__(self, stage: str, status_code: int):
        super().__init__(stage, f"unexpected status code {status_code}")
        self.status_code = status_code


class DecodeError(RemoteStoreError):
    """The response body is not a JSON array of strings."""
    pass


class ContractError(CustomExampleError):
    """The orchestrator handed over a value of the wrong shape."""
    pass
