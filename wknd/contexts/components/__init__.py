"""
Components Context

Responsibilities:
- Builds request-scoped view models from content resources
- Decides whether a component has enough content to be displayed
- Maps resource types to their view models

Owns: Component view models, model factory
Never: Produces markup
"""

from wknd.contexts.components.byline import RESOURCE_TYPE as BYLINE_RESOURCE_TYPE
from wknd.contexts.components.byline import BylineModel
from wknd.contexts.components.model_factory import (
    ModelFactory,
    ModelNotFoundError,
    default_model_factory,
)

__all__ = [
    "BylineModel",
    "BYLINE_RESOURCE_TYPE",
    "ModelFactory",
    "ModelNotFoundError",
    "default_model_factory",
]
