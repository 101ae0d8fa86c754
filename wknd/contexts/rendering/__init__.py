"""
Rendering Context

Responsibilities:
- Loads and caches component templates
- Renders component view models to HTML
- Shows authoring placeholders for empty components in edit mode

Owns: Templates, markup output
Never: Reads content properties directly
"""

from wknd.contexts.rendering.exceptions import ComponentRenderError
from wknd.contexts.rendering.registries import TemplateRegistry
from wknd.contexts.rendering.renderer import ComponentRenderer

__all__ = ["ComponentRenderer", "ComponentRenderError", "TemplateRegistry"]
