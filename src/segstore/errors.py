"""Structured error types for segstore."""

from __future__ import annotations


class SegstoreError(Exception):
    """Base error for all segstore errors."""


class ConfigurationError(SegstoreError):
    """Raised when a configuration property is missing, malformed, or unparseable."""

    def __init__(self, property_name: str, detail: str) -> None:
        self.property_name = property_name
        self.detail = detail
        super().__init__(f"Invalid configuration for '{property_name}': {detail}")


class WiringError(SegstoreError):
    """Raised when storage factory selection receives inconsistent inputs."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
