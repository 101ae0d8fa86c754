"""
Component Renderer

Renders component view models to HTML. A model that reports itself empty is not
rendered: authors in edit mode see a placeholder instead, visitors see nothing.
"""

from typing import Any, Dict

from jinja2 import TemplateError

from wknd.contexts.components import ModelFactory, default_model_factory
from wknd.contexts.content import RenderContext, Resource
from wknd.contexts.rendering.exceptions import ComponentRenderError
from wknd.contexts.rendering.logger import log_render_result
from wknd.contexts.rendering.registries import TemplateRegistry
from wknd.utils.settings import load_settings

PLACEHOLDER_TEMPLATE = "placeholder"


class ComponentRenderer:
    """Renders component models through their registered templates."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        model_factory: ModelFactory = None,
        rendering_settings: Dict[str, Any] = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.model_factory = model_factory or default_model_factory()

        if rendering_settings is None:
            rendering_settings = load_settings()["rendering"]
        self.occupation_separator = rendering_settings["occupation_separator"]
        self.placeholder_text = rendering_settings["placeholder"]["empty_text"]

    def _render_template(self, template_name: str, component_name: str, **template_vars) -> str:
        try:
            return self.template_registry.get_template(template_name).render(**template_vars)
        except TemplateError as e:
            raise ComponentRenderError(
                f"Failed to render template '{template_name}'",
                component_name=component_name,
                original_error=e,
            ) from e

    def render(self, model, component_name: str, context: RenderContext) -> str:
        """
        Render a component model.

        Args:
            model: View model exposing is_empty()
            component_name: Template name of the component (e.g., 'byline')
            context: Page context of the current request

        Returns:
            Component HTML, the authoring placeholder (empty model, edit mode),
            or "" (empty model otherwise)

        Raises:
            ComponentRenderError: If the template is missing or fails to render
        """
        if model.is_empty():
            if context.is_edit_mode:
                return self._render_template(
                    PLACEHOLDER_TEMPLATE, component_name, empty_text=self.placeholder_text
                )
            return ""

        return self._render_template(
            component_name,
            component_name,
            model=model,
            occupation_separator=self.occupation_separator,
        )

    def render_resource(self, resource: Resource, context: RenderContext) -> str:
        """
        Adapt a resource to its model and render it.

        The template is named after the last segment of the resource type
        (wknd/components/byline -> byline).

        Raises:
            ModelNotFoundError: If no model is registered for the resource type
            ComponentRenderError: If the template is missing or fails to render
        """
        model = self.model_factory.create_model(resource, context)
        component_name = resource.resource_type.rsplit("/", 1)[-1]

        output = self.render(model, component_name, context)
        log_render_result(
            component_name,
            resource.path,
            output,
            placeholder=bool(output) and model.is_empty(),
        )
        return output
