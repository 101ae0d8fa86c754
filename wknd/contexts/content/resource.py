"""
Content Resources

Structured representation of authored content nodes. A content file is a YAML
mapping: mapping-valued entries are child nodes, every other entry is a
property of the node.

Example content file:

    jcr:path: /content/wknd/us/en/about/jcr:content/byline
    sling:resourceType: wknd/components/byline
    name: Jane Doe
    occupations: [Writer, Engineer]
    fileReference: /content/dam/wknd/jane.png
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from wknd.contexts.content.exceptions import ContentNodeError
from wknd.contexts.content.logger import log_content_loaded, log_property_coercion_failed

RESOURCE_TYPE_PROPERTY = "sling:resourceType"
PATH_PROPERTY = "jcr:path"

# Scalar types that coerce to text the way the content repository does
SCALAR_TYPES = (str, int, float, bool)


class ValueMap(Mapping):
    """
    Read-only property map of a resource with typed accessors.

    Typed accessors never raise on bad content: a value of the wrong shape is
    logged and the default is returned.
    """

    def __init__(self, properties: Dict[str, Any] = None, path: str = ""):
        self._properties = dict(properties or {})
        self.path = path

    def __getitem__(self, key: str) -> Any:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def get_str(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a property as text.

        Args:
            name: Property name
            default: Value returned when the property is absent or not a scalar

        Returns:
            Text value (numbers and booleans are converted with str())
        """
        value = self._properties.get(name)
        if value is None:
            return default
        if isinstance(value, str):
            return value
        if isinstance(value, SCALAR_TYPES):
            return str(value)

        log_property_coercion_failed(self.path, name, type(value).__name__, "text")
        return default

    def get_str_list(self, name: str, default: Optional[List[str]] = None) -> List[str]:
        """
        Get a property as a list of text values.

        A single scalar is read as a one-element list, matching how the content
        repository treats single-valued properties read as arrays.

        Args:
            name: Property name
            default: Value returned when the property is absent or malformed
                     (defaults to an empty list)

        Returns:
            New list of text values
        """
        if default is None:
            default = []

        value = self._properties.get(name)
        if value is None:
            return list(default)
        if isinstance(value, SCALAR_TYPES):
            return [str(value)]
        if isinstance(value, (list, tuple)):
            if all(isinstance(item, SCALAR_TYPES) for item in value):
                return [str(item) for item in value]

        log_property_coercion_failed(self.path, name, type(value).__name__, "text list")
        return list(default)


@dataclass
class Resource:
    """
    A content node: path, property map and named child nodes.

    Attributes:
        path: Absolute resource path (e.g., "/content/wknd/us/en/jcr:content/byline")
        properties: Property map of this node
        children: Child resources by node name, in authored order
    """

    path: str
    properties: ValueMap = field(default_factory=ValueMap)
    children: Dict[str, "Resource"] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Node name (last path segment)."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def resource_type(self) -> Optional[str]:
        """Component resource type (sling:resourceType), if set."""
        return self.properties.get_str(RESOURCE_TYPE_PROPERTY)

    def get_child(self, name: str) -> Optional["Resource"]:
        """Get a direct child by node name, or None."""
        return self.children.get(name)

    @classmethod
    def from_dict(cls, path: str, node: Dict[str, Any]) -> "Resource":
        """
        Build a resource tree from a plain nested dict.

        Args:
            path: Path of this node
            node: Node dict (mapping values become children)

        Returns:
            Resource with its whole subtree
        """
        properties = {}
        children = {}
        for key, value in node.items():
            if key == PATH_PROPERTY:
                continue
            if isinstance(value, dict):
                children[key] = cls.from_dict(f"{path.rstrip('/')}/{key}", value)
            else:
                properties[key] = value

        return cls(path=path, properties=ValueMap(properties, path=path), children=children)


def load_resource(content_file: Path) -> Resource:
    """
    Load a YAML content file into a resource tree.

    The root path comes from the file's jcr:path entry, or "/<file stem>".

    Args:
        content_file: Path to YAML content file

    Returns:
        Root Resource

    Raises:
        ContentNodeError: If the file is missing, unparseable, or not a mapping
    """
    content_file = Path(content_file)

    if not content_file.exists():
        raise ContentNodeError("Content file not found", path=str(content_file))

    try:
        node = OmegaConf.to_container(OmegaConf.load(content_file), resolve=False)
    except (OmegaConfBaseException, YAMLError) as e:
        raise ContentNodeError(f"Content file could not be parsed: {e}", path=str(content_file)) from e

    if not isinstance(node, dict):
        raise ContentNodeError("Content root must be a mapping", path=str(content_file))

    root_path = node.get(PATH_PROPERTY) or f"/{content_file.stem}"
    if not isinstance(root_path, str):
        raise ContentNodeError(
            "Resource path must be text", path=str(content_file), property_name=PATH_PROPERTY
        )

    resource = Resource.from_dict(root_path, node)
    log_content_loaded(content_file, resource.path, len(resource.children))
    return resource
