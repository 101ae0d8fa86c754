"""
Byline Component Model

Request-scoped view model of the byline component: a person's name, their
occupations and a photo. Templates read the accessors and use is_empty() to
decide whether the byline is rendered at all.
"""

from typing import List, Optional, Sequence

from wknd.contexts.components.logger import log_empty_reason, log_image_unavailable
from wknd.contexts.content import (
    ContentImageResolver,
    ContentNodeError,
    ImageModel,
    ImageResolver,
    RenderContext,
    Resource,
)
from wknd.utils.text_processing import is_blank, sorted_copy

RESOURCE_TYPE = "wknd/components/byline"

NAME_PROPERTY = "name"
OCCUPATIONS_PROPERTY = "occupations"


class BylineModel:
    """
    View model of one byline instance.

    Holds its own copies of the authored values; nothing is shared between
    instances and nothing changes after construction.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        occupations: Optional[Sequence[str]] = None,
        image: Optional[ImageModel] = None,
    ):
        """
        Args:
            name: Display name (required non-blank for the byline to render)
            occupations: Occupation titles in authored order (None treated as empty)
            image: Resolved image, or None if unavailable
        """
        self._name = name
        self._occupations = list(occupations) if occupations is not None else []
        self._image = image

    @classmethod
    def from_resource(
        cls,
        resource: Resource,
        context: RenderContext,
        image_resolver: ImageResolver = None,
    ) -> "BylineModel":
        """
        Build a byline from its content resource.

        Args:
            resource: Byline content node
            context: Page context of the current request
            image_resolver: Image collaborator (defaults to ContentImageResolver)

        Returns:
            BylineModel with image set to None if it could not be resolved
        """
        if image_resolver is None:
            image_resolver = ContentImageResolver()

        try:
            image = image_resolver.resolve(resource, context)
        except ContentNodeError as e:
            log_image_unavailable(resource.path, e)
            image = None

        return cls(
            name=resource.properties.get_str(NAME_PROPERTY),
            occupations=resource.properties.get_str_list(OCCUPATIONS_PROPERTY),
            image=image,
        )

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def occupations(self) -> List[str]:
        """Occupations sorted ascending, as a new list (empty if none)."""
        return sorted_copy(self._occupations)

    @property
    def image(self) -> Optional[ImageModel]:
        return self._image

    def is_empty(self) -> bool:
        """
        Check whether the byline lacks the content required to render.

        Name, at least one occupation and an image with a source are all required.
        """
        if is_blank(self._name):
            log_empty_reason("byline", "name is missing")
            return True
        elif not self._occupations:
            log_empty_reason("byline", "no occupations")
            return True
        elif self._image is None or is_blank(self._image.src):
            log_empty_reason("byline", "no valid image")
            return True
        else:
            return False

    def __repr__(self) -> str:
        return f"BylineModel(name={self._name!r}, occupations={self._occupations!r}, image={self._image!r})"
