"""Page-level context for a single rendering request."""

from dataclasses import dataclass
from enum import Enum

PAGE_CONTENT_NODE = "jcr:content"


class WCMMode(str, Enum):
    """Authoring mode the page is rendered in."""

    DISABLED = "disabled"
    EDIT = "edit"
    PREVIEW = "preview"


@dataclass(frozen=True)
class RenderContext:
    """
    Page and component context of one rendering request.

    Attributes:
        page_path: Path of the page containing the component
        wcm_mode: Authoring mode (placeholders are only shown in edit mode)
    """

    page_path: str = ""
    wcm_mode: WCMMode = WCMMode.DISABLED

    @property
    def is_edit_mode(self) -> bool:
        return self.wcm_mode == WCMMode.EDIT

    @classmethod
    def for_resource_path(cls, resource_path: str, wcm_mode: WCMMode = WCMMode.DISABLED) -> "RenderContext":
        """
        Build the context of a component, deriving the page from its path.

        The page is everything before the first /jcr:content segment; a path
        without one is treated as the page itself.

        Example:
            >>> RenderContext.for_resource_path("/content/wknd/en/jcr:content/root/byline").page_path
            '/content/wknd/en'
        """
        page_path = resource_path.split(f"/{PAGE_CONTENT_NODE}", 1)[0]
        return cls(page_path=page_path, wcm_mode=wcm_mode)
