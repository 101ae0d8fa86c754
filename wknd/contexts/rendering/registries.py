"""
Rendering Registries

Loads and caches the Jinja2 templates components are rendered with.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("WKND_TEMPLATES_PATH", Path(__file__).resolve().parent / "templates"))

TEMPLATE_FILENAME = "template.html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for component rendering.

    Templates are stored in {templates_base_path}/{component_name}/template.html.jinja.
    The authoring placeholder is the "placeholder" template.
    """

    def __init__(self, templates_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_base_path: Base path for component template directories.
                                 Defaults to WKND_TEMPLATES_PATH from environment,
                                 or the packaged templates.
        """
        if templates_base_path is None:
            templates_base_path = TEMPLATES_PATH

        self.templates_base_path = Path(templates_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, component_name: str) -> Template:
        """
        Get a template by component name, loading and caching it if necessary.

        Args:
            component_name: Name of the component (e.g., 'byline')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if component_name in self._cache:
            return self._cache[component_name]

        template_path = f"{component_name}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for component '{component_name}' at {self.templates_base_path / template_path}"
            ) from e

        self._cache[component_name] = template
        return template

    def get_template_path(self, component_name: str) -> Path:
        """Get the file path for a component's template."""
        return self.templates_base_path / component_name / TEMPLATE_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, component_name: str) -> bool:
        return component_name in self._cache
