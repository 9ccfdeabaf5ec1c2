"""Element model: one record per markup tag occurrence."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from quickreact.errors import QRArgumentError

CONFIG_TAG = "Config"
APP_TAG = "App"

AttributeValue = Union[bool, str]


class ElementCategory(str, Enum):
    CONFIG = "config"
    COMPONENT = "component"


class TagKind(str, Enum):
    NONE = ""
    OPEN = "opentag"
    CLOSE = "closetag"
    SELF_CLOSING = "selfclosingtag"


class Element:
    """
    A parsed markup tag with a name, category, tag kind and attribute map.

    Attributes keep insertion order and unique keys (last write wins).
    ``extras`` holds ``key=value`` tokens outside the known vocabulary.
    Elements compare by identity, so two ``<Header/>`` tags are two values.
    """

    def __init__(
        self,
        name: Optional[str],
        category: Optional[Union[ElementCategory, str]],
        attributes: Optional[Mapping[str, AttributeValue]] = None,
        *,
        subcategory: Union[TagKind, str] = TagKind.NONE,
    ) -> None:
        if name is None or category is None:
            raise QRArgumentError("Quick-React elements must be instantiated with a name and category.")
        if attributes is not None and not isinstance(attributes, Mapping):
            raise QRArgumentError(
                "Quick-React element attributes must be submitted as a mapping of key, value pairs."
            )
        self.name = name
        self.category = ElementCategory(category)
        self.subcategory = TagKind(subcategory)
        self._attributes: Dict[str, AttributeValue] = dict(attributes or {})
        self.extras: Dict[str, str] = {}

    @property
    def is_config(self) -> bool:
        return self.category is ElementCategory.CONFIG

    @property
    def is_open(self) -> bool:
        return self.subcategory is TagKind.OPEN

    @property
    def is_close(self) -> bool:
        return self.subcategory is TagKind.CLOSE

    @property
    def is_self_closing(self) -> bool:
        return self.subcategory is TagKind.SELF_CLOSING

    @property
    def bare_name(self) -> str:
        """Name without the leading ``/`` carried by closing tags."""
        return self.name[1:] if self.name.startswith("/") else self.name

    def has_attribute(self, key: str) -> bool:
        return key in self._attributes

    def attribute_equals(self, key: str, value: AttributeValue) -> bool:
        """Return True only when ``key`` is set and holds exactly ``value``.

        Booleans and strings never compare equal, so ``fetch=POST`` does not
        satisfy ``attribute_equals("fetch", True)``.
        """
        if key not in self._attributes:
            return False
        current = self._attributes[key]
        return type(current) is type(value) and current == value

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def set_attribute(self, key: str, value: AttributeValue) -> None:
        self._attributes[key] = value

    def delete_attribute(self, key: str) -> bool:
        return self._attributes.pop(key, None) is not None

    def append_attribute(self, key: str, value: str) -> None:
        """Append ``value`` to the comma-joined list stored under ``key``."""
        current = self._attributes.get(key)
        if isinstance(current, str) and current:
            self._attributes[key] = f"{current},{value}"
        else:
            self._attributes[key] = value

    def attribute_count(self) -> int:
        return len(self._attributes)

    def all_attributes(self) -> List[Tuple[str, AttributeValue]]:
        return list(self._attributes.items())

    @property
    def attributes(self) -> Dict[str, AttributeValue]:
        """A copy of the attribute map."""
        return dict(self._attributes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "subcategory": self.subcategory.value,
            "attributes": dict(self._attributes),
            "extras": dict(self.extras),
        }

    def __str__(self) -> str:
        if not self._attributes:
            return self.name
        rendered = " ".join(f"{key}={value}" for key, value in self._attributes.items())
        return f"{self.name} {rendered}"

    def __repr__(self) -> str:
        return (
            f"Element(name={self.name!r}, category={self.category.value!r}, "
            f"subcategory={self.subcategory.value!r}, attributes={self._attributes!r})"
        )


def make_config_element() -> Element:
    """Build the default root element used when a document has no ``<Config>`` tag."""
    return Element(CONFIG_TAG, ElementCategory.CONFIG)


__all__ = [
    "APP_TAG",
    "CONFIG_TAG",
    "AttributeValue",
    "Element",
    "ElementCategory",
    "TagKind",
    "make_config_element",
]
