"""Custom exceptions for rendering context with template references."""

from typing import Optional


class ComponentRenderError(Exception):
    """
    Exception raised when a component template fails to render.

    Attributes:
        message: Error description
        component_name: Name of the component being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        component_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.component_name = component_name
        self.original_error = original_error

        parts = [message]

        if component_name:
            parts.append(f"Component: {component_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
