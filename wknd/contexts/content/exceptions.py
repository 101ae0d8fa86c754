"""Custom exceptions for the content context with resource references."""

from typing import Optional


class ContentNodeError(Exception):
    """
    Exception raised when a content node is missing or malformed.

    Attributes:
        message: Error description
        path: Resource path or content file the error refers to
        property_name: Name of the offending property, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        property_name: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.property_name = property_name

        parts = [message]

        if path:
            parts.append(f"Resource: {path}")

        if property_name:
            parts.append(f"Property: {property_name}")

        super().__init__("\n".join(parts))
