"""
Custom exceptions for OFD Graphics.

This module defines all custom exceptions used throughout the library.
"""


class OFDGraphicsError(Exception):
    """Base exception for all OFD Graphics errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown OFD graphics error occurred."


class ConfigurationError(OFDGraphicsError, ValueError):
    """Raised when the document output location is missing or invalid."""

    @property
    def default_message(self) -> str:
        return "OFD output path is missing or invalid."


class ResourceIngestionError(OFDGraphicsError):
    """Raised when an image resource cannot be staged or encoded."""

    @property
    def default_message(self) -> str:
        return "Failed to write image resource into the document."


class PackagingError(OFDGraphicsError):
    """Raised when the document tree cannot be serialized or archived."""

    @property
    def default_message(self) -> str:
        return "Failed to package the OFD document."


class DocumentClosedError(OFDGraphicsError):
    """Raised when a document is modified after it has been closed."""

    @property
    def default_message(self) -> str:
        return "The OFD document has already been closed."
