"""
Image resolution for content components.

Components that display an image do not read image properties themselves; they
ask an ImageResolver for an ImageModel over their resource. Resolvers are
passed in explicitly so tests can substitute a double.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from wknd.contexts.content.exceptions import ContentNodeError
from wknd.contexts.content.logger import _log_debug
from wknd.contexts.content.request import RenderContext
from wknd.contexts.content.resource import Resource
from wknd.utils.settings import load_settings
from wknd.utils.text_processing import is_blank


@dataclass(frozen=True)
class ImageModel:
    """
    Display-ready image of a component.

    Attributes:
        src: Source URL used by the template (None if no asset is referenced)
        alt: Alternative text
        file_reference: Raw DAM asset path as authored
    """

    src: Optional[str] = None
    alt: Optional[str] = None
    file_reference: Optional[str] = None


class ImageResolver(ABC):
    """Resolves the image of a component resource."""

    @abstractmethod
    def resolve(self, resource: Resource, context: RenderContext) -> Optional[ImageModel]:
        """
        Resolve the image for a resource.

        Returns:
            ImageModel, or None if the resource has no image

        Raises:
            ContentNodeError: If the image content is malformed
        """
        pass


class ContentImageResolver(ImageResolver):
    """
    Resolves images from authored image properties.

    Reads the file reference and alt text from the configured image child node
    when the resource has one, otherwise from the resource itself.
    """

    def __init__(self, image_settings: Dict[str, Any] = None):
        if image_settings is None:
            image_settings = load_settings()["content"]["image"]

        self.file_reference_property = image_settings["file_reference_property"]
        self.alt_property = image_settings["alt_property"]
        self.child_node = image_settings.get("child_node")
        self.dam_root = image_settings["dam_root"]

    def _image_node(self, resource: Resource) -> Resource:
        if self.child_node:
            child = resource.get_child(self.child_node)
            if child is not None:
                return child
        return resource

    def _to_src(self, file_reference: str) -> str:
        """Apply the DAM root to relative references; absolute paths and URLs pass through."""
        if file_reference.startswith("/") or "://" in file_reference:
            return file_reference
        return f"{self.dam_root.rstrip('/')}/{file_reference}"

    def resolve(self, resource: Resource, context: RenderContext) -> Optional[ImageModel]:
        node = self._image_node(resource)

        file_reference = node.properties.get(self.file_reference_property)
        if file_reference is not None and not isinstance(file_reference, str):
            raise ContentNodeError(
                f"Image file reference must be text, got {type(file_reference).__name__}",
                path=node.path,
                property_name=self.file_reference_property,
            )

        alt = node.properties.get_str(self.alt_property)

        if is_blank(file_reference):
            _log_debug(f"{node.path}: no image file reference")
            return ImageModel(src=None, alt=alt, file_reference=file_reference)

        src = self._to_src(file_reference.strip())
        _log_debug(f"{node.path}: resolved image {src} (page {context.page_path or '-'})")
        return ImageModel(src=src, alt=alt, file_reference=file_reference)
