"""
Model Factory

Maps component resource types to the factories that build their view models,
so a renderer can adapt any resource without knowing its component.
"""

from typing import Any, Callable, Dict, List

from wknd.contexts.components.byline import RESOURCE_TYPE as BYLINE_RESOURCE_TYPE
from wknd.contexts.components.byline import BylineModel
from wknd.contexts.components.logger import log_model_created
from wknd.contexts.content import ContentImageResolver, ImageResolver, RenderContext, Resource

ModelBuilder = Callable[[Resource, RenderContext], Any]


class ModelNotFoundError(LookupError):
    """Raised when no model is registered for a resource type."""

    def __init__(self, resource_type: str, resource_path: str = None):
        self.resource_type = resource_type
        self.resource_path = resource_path

        message = f"No model registered for resource type '{resource_type}'"
        if resource_path:
            message += f" (resource: {resource_path})"
        super().__init__(message)


class ModelFactory:
    """Registry of model builders keyed by resource type."""

    def __init__(self):
        self._builders: Dict[str, ModelBuilder] = {}

    def register(self, resource_type: str, builder: ModelBuilder) -> None:
        """
        Register the builder for a resource type.

        Raises:
            ValueError: If the resource type is already registered
        """
        if resource_type in self._builders:
            raise ValueError(f"Resource type '{resource_type}' is already registered")
        self._builders[resource_type] = builder

    def is_registered(self, resource_type: str) -> bool:
        return resource_type in self._builders

    @property
    def resource_types(self) -> List[str]:
        return sorted(self._builders)

    def create_model(self, resource: Resource, context: RenderContext) -> Any:
        """
        Adapt a resource to the model registered for its resource type.

        Args:
            resource: Component resource (must carry sling:resourceType)
            context: Page context of the current request

        Returns:
            Model instance built by the registered builder

        Raises:
            ModelNotFoundError: If the resource type is missing or unregistered
        """
        resource_type = resource.resource_type
        if resource_type not in self._builders:
            raise ModelNotFoundError(str(resource_type), resource.path)

        model = self._builders[resource_type](resource, context)
        log_model_created(resource.path, resource_type, model)
        return model


def default_model_factory(image_resolver: ImageResolver = None) -> ModelFactory:
    """
    Build a factory with all WKND components registered.

    Args:
        image_resolver: Image collaborator shared by image-bearing components
                        (defaults to ContentImageResolver)

    Raises:
        FileNotFoundError: If WKND_SETTINGS_PATH names a missing settings file
    """
    if image_resolver is None:
        image_resolver = ContentImageResolver()

    factory = ModelFactory()
    factory.register(
        BYLINE_RESOURCE_TYPE,
        lambda resource, context: BylineModel.from_resource(resource, context, image_resolver),
    )
    return factory
