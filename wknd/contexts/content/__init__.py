"""
Content Context

Responsibilities:
- Represents authored content nodes (resources and their property maps)
- Loads content trees from YAML content files
- Resolves component images from authored image properties

Owns: Resource/ValueMap model, content loading, image resolution
Never: Decides how or whether a component is displayed
"""

from wknd.contexts.content.exceptions import ContentNodeError
from wknd.contexts.content.image import ContentImageResolver, ImageModel, ImageResolver
from wknd.contexts.content.request import RenderContext, WCMMode
from wknd.contexts.content.resource import Resource, ValueMap, load_resource

__all__ = [
    # Content nodes
    "Resource",
    "ValueMap",
    "load_resource",
    "ContentNodeError",
    # Request context
    "RenderContext",
    "WCMMode",
    # Images
    "ImageModel",
    "ImageResolver",
    "ContentImageResolver",
]
