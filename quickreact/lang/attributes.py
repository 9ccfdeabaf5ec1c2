"""
Attribute resolution for QuickReact elements.

Every token after a tag's name is looked up in a closed vocabulary:

- FLAG tokens set a boolean (``form``, ``router``, ``bootstrap`` ...)
- CHOICE tokens pick an enumerated value (``fetch=post`` -> ``"POST"``)
- LIST tokens accumulate into a comma-joined string (``hooks=``,
  ``forminputs=`` and bare hook names such as ``useState*2``)

Lookups ignore case. Tokens outside the vocabulary are not errors.

Multiplier expressions inside attribute values (``useState*3``,
``text[first_name,last_name]``, bare ``useEffect``) are expanded by
``find_multiplier`` into generated names used by the code generator.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence

from quickreact.errors import QRSyntaxError

from .element import (
    CONFIG_TAG,
    AttributeValue,
    Element,
    ElementCategory,
)
from .lexer import RawTag

logger = logging.getLogger(__name__)


class AttributeKind(Enum):
    FLAG = "flag"
    CHOICE = "choice"
    LIST = "list"


@dataclass(frozen=True)
class AttributeSpec:
    """How one recognized token writes into an element."""

    kind: AttributeKind
    key: str
    value: AttributeValue = True


FLAG_SPELLINGS: Dict[str, str] = {
    "bootstrap": "react-bootstrap",
    "reactbootstrap": "react-bootstrap",
    "react-bootstrap": "react-bootstrap",
    "fetch": "fetch",
    "link": "link",
    "switch": "switch",
    "route": "route",
    "router": "router",
    "map": "map",
    "form": "form",
}

FETCH_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")

HOOK_NAMES = (
    "useEffect",
    "useState",
    "useReducer",
    "useContext",
    "useLocation",
    "useHistory",
    "useParams",
)

REACT_HOOKS = ("useEffect", "useState", "useContext", "useReducer")
ROUTER_HOOKS = ("useLocation", "useHistory", "useParams")

LIST_PREFIXES: Dict[str, str] = {
    "forminputs=": "forminputs",
    "forminput=": "forminputs",
    "hooks=": "hooks",
}

_HOOK_LOOKUP = {name.lower(): name for name in HOOK_NAMES}
_HOOK_NAME = re.compile("|".join(HOOK_NAMES), re.IGNORECASE)
_HOOK_WITH_SUFFIX = re.compile(r"^(use[a-z]+)(\*\d+|\[[^\]]*\])$", re.IGNORECASE)
MAX_MULTIPLIER = 99
_MULTIPLIER_SUFFIX = re.compile(r"\*(\d+)$")


def _build_vocabulary() -> Dict[str, AttributeSpec]:
    table: Dict[str, AttributeSpec] = {}
    for spelling, key in FLAG_SPELLINGS.items():
        spec = AttributeSpec(AttributeKind.FLAG, key, True)
        table[spelling] = spec
        table[f"{spelling}=true"] = spec
    for method in FETCH_METHODS:
        table[f"fetch={method.lower()}"] = AttributeSpec(AttributeKind.CHOICE, "fetch", method)
    for hook in HOOK_NAMES:
        spec = AttributeSpec(AttributeKind.LIST, "hooks", hook)
        table[hook.lower()] = spec
        table[f"{hook.lower()}=true"] = spec
    return table


VOCABULARY: Dict[str, AttributeSpec] = _build_vocabulary()


def canonicalize_hooks(value: str) -> str:
    """Rewrite every known hook name in ``value`` to its canonical camel case."""
    return _HOOK_NAME.sub(lambda match: _HOOK_LOOKUP[match.group(0).lower()], value)


def classify_token(token: str) -> Optional[AttributeSpec]:
    """Return the vocabulary entry for ``token``, or None if it is not recognized."""
    lowered = token.lower()
    spec = VOCABULARY.get(lowered)
    if spec is not None:
        return spec

    for prefix, key in LIST_PREFIXES.items():
        if lowered.startswith(prefix):
            value = token[len(prefix):]
            if not value:
                return None
            if key == "hooks":
                value = canonicalize_hooks(value)
            return AttributeSpec(AttributeKind.LIST, key, value)

    match = _HOOK_WITH_SUFFIX.match(token)
    if match:
        hook = _HOOK_LOOKUP.get(match.group(1).lower())
        if hook is not None:
            return AttributeSpec(AttributeKind.LIST, "hooks", f"{hook}{match.group(2)}")
    return None


def apply_token(element: Element, token: str) -> bool:
    """Apply one attribute token to ``element``; return True if it was recognized."""
    spec = classify_token(token)
    if spec is None:
        key, sep, value = token.partition("=")
        if sep and key:
            element.extras[key] = value
        logger.debug("Ignoring unrecognized attribute %r on <%s>", token, element.name)
        return False
    if spec.kind is AttributeKind.LIST:
        element.append_attribute(spec.key, str(spec.value))
    else:
        element.set_attribute(spec.key, spec.value)
    return True


def resolve_element(tag: RawTag) -> Element:
    """Build an ``Element`` from a lexed tag, resolving all of its attribute tokens."""
    name = tag.tokens[0]
    category = (
        ElementCategory.CONFIG if name.lstrip("/") == CONFIG_TAG else ElementCategory.COMPONENT
    )
    element = Element(name, category, subcategory=tag.kind)
    for token in tag.tokens[1:]:
        apply_token(element, token)
    return element


# ----------------------------------------------------------------------
# Multiplier expressions
# ----------------------------------------------------------------------


class GeneratedName(NamedTuple):
    """A generated identifier in the three casings templates need."""

    default: str
    lower: str
    mixed: str

    @classmethod
    def from_text(cls, text: str) -> "GeneratedName":
        lower = text.lower()
        return cls(default=text, lower=lower, mixed=lower[:1].upper() + lower[1:])


@functools.lru_cache(maxsize=None)
def _family_pattern(family: str) -> "re.Pattern[str]":
    return re.compile(
        rf"(?<!\w){re.escape(family)}(?:\*(?P<count>\d+)|\[(?P<names>[^\]]+)\])?(?!\w)"
    )


def _checked_count(digits: str, expression: str) -> int:
    count = int(digits)
    if count > MAX_MULTIPLIER:
        raise QRSyntaxError(
            f"The multiplier in '{expression}' is too large.",
            hint=f"Multipliers take one or two digits (at most *{MAX_MULTIPLIER}).",
        )
    return count


def parse_multiplier(text: str) -> int:
    """
    Return the ``*N``/``*NN`` suffix of ``text``, or 1 when there is none.

    Raises:
        QRSyntaxError: If the suffix is larger than ``MAX_MULTIPLIER``
    """
    match = _MULTIPLIER_SUFFIX.search(text)
    return _checked_count(match.group(1), text) if match else 1


def find_multiplier(
    element: Element,
    family: str,
    default_name: str,
    match_index: int = 0,
    keys: Optional[Sequence[str]] = None,
) -> List[GeneratedName]:
    """
    Expand the ``match_index``-th occurrence of ``family`` into generated names.

    The attribute values of ``element`` (or only those under ``keys``) are
    searched for ``family*NN``, ``family*N``, ``family[a,b]`` or a bare
    ``family``. The first attribute holding more than ``match_index``
    occurrences supplies the match.

    Args:
        element: Element whose attributes are searched
        family: Attribute family such as ``useState`` or ``text``
        default_name: Base for generated names when no list is given
        match_index: Which occurrence to expand (0-based)
        keys: Optional attribute keys to restrict the search to

    Returns:
        One ``GeneratedName`` per requested instance; empty when the family
        (or that occurrence) is absent.

    Raises:
        QRSyntaxError: If a ``*N`` count is larger than ``MAX_MULTIPLIER``

    Example:
        >>> element = Element("App", "component", {"hooks": "useState*2"})
        >>> [name.default for name in find_multiplier(element, "useState", "appState")]
        ['appState1', 'appState2']
    """
    pattern = _family_pattern(family)
    chosen = None
    for key, value in element.all_attributes():
        if keys is not None and key not in keys:
            continue
        if not isinstance(value, str):
            continue
        matches = list(pattern.finditer(value))
        if match_index < len(matches):
            chosen = matches[match_index]
            break

    if chosen is None:
        return []

    listed = chosen.group("names")
    if listed is not None:
        entries = [entry.strip() for entry in listed.split(",")]
        return [GeneratedName.from_text(entry) for entry in entries if entry]

    digits = chosen.group("count")
    count = _checked_count(digits, chosen.group(0)) if digits else 1
    base = default_name.strip()
    return [GeneratedName.from_text(f"{base}{index}") for index in range(1, count + 1)]


def multiplier_count(
    element: Element,
    family: str,
    default_name: str,
    match_index: int = 0,
    keys: Optional[Sequence[str]] = None,
) -> int:
    """Number of instances requested by the ``match_index``-th ``family`` occurrence."""
    return len(find_multiplier(element, family, default_name, match_index, keys))


def multiplier_groups(
    element: Element,
    family: str,
    default_name: str,
    keys: Optional[Sequence[str]] = None,
) -> Iterator[List[GeneratedName]]:
    """Yield the names of each ``family`` occurrence in turn until one is absent."""
    match_index = 0
    while True:
        names = find_multiplier(element, family, default_name, match_index, keys)
        if not names:
            return
        yield names
        match_index += 1


def has_hook(element: Element, hook: str) -> bool:
    """Return True if ``hook`` appears in the element's ``hooks`` list."""
    hooks = element.get_attribute("hooks")
    if not isinstance(hooks, str):
        return False
    return _family_pattern(hook).search(hooks) is not None


def declared_hooks(element: Element, candidates: Sequence[str] = HOOK_NAMES) -> List[str]:
    """Return the hooks from ``candidates`` declared on ``element``, in candidate order."""
    return [hook for hook in candidates if has_hook(element, hook)]


__all__ = [
    "AttributeKind",
    "AttributeSpec",
    "FETCH_METHODS",
    "FLAG_SPELLINGS",
    "GeneratedName",
    "HOOK_NAMES",
    "LIST_PREFIXES",
    "MAX_MULTIPLIER",
    "REACT_HOOKS",
    "ROUTER_HOOKS",
    "VOCABULARY",
    "apply_token",
    "canonicalize_hooks",
    "classify_token",
    "declared_hooks",
    "find_multiplier",
    "has_hook",
    "multiplier_count",
    "multiplier_groups",
    "parse_multiplier",
    "resolve_element",
]
