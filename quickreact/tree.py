"""
Ordered n-ary tree used as the intermediate representation for QuickReact.

Every parsed markup document becomes an ``NaryTree`` whose root holds the
``Config`` element, whose first child holds the ``App`` element, and whose
remaining nodes mirror the nesting of component tags.

The tree keeps a structural version counter (``mod_count``). Every insert,
removal or clear increments it; read-only queries never do. Traversal
iterators capture the counter when they are created and raise
``QRConcurrentModificationError`` on the next pull once it has moved.
"""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional

from .errors import (
    QRArgumentError,
    QRConcurrentModificationError,
    QRRangeError,
    QRReferenceError,
)

_MISSING = object()


@dataclass(eq=False)
class NaryNode:
    """A tree node holding one value and an ordered list of child nodes."""

    value: Any
    children: List["NaryNode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.value is None:
            raise QRArgumentError("n-ary nodes must be instantiated with a valid child object.")

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"NaryNode({self.value!r}, children={len(self.children)})"


class _VersionedIterator:
    """Base for lazy, one-shot traversals bound to a tree version snapshot."""

    def __init__(self, tree: "NaryTree", version: Optional[int] = None) -> None:
        self._tree = tree
        self._version = tree.mod_count if version is None else version

    @property
    def version(self) -> int:
        """The structural version this traversal was started against."""
        return self._version

    def __iter__(self) -> "_VersionedIterator":
        return self

    def _check(self) -> None:
        if self._tree.mod_count != self._version:
            raise QRConcurrentModificationError(
                "The n-ary tree was modified during iteration of the tree."
            )


class LevelOrderIterator(_VersionedIterator):
    """Breadth-first traversal starting at ``start``."""

    def __init__(self, tree: "NaryTree", start: Optional[NaryNode], version: Optional[int] = None) -> None:
        super().__init__(tree, version)
        self._queue: Deque[NaryNode] = deque([start] if start is not None else [])

    def __next__(self) -> NaryNode:
        if not self._queue:
            raise StopIteration
        self._check()
        node = self._queue.popleft()
        self._queue.extend(node.children)
        return node


class PreOrderIterator(_VersionedIterator):
    """Depth-first traversal yielding each parent before its children.

    Descendants are walked from an explicit stack under the single version
    captured at construction, so a nested subtree walk started with
    ``version=outer.version`` agrees with the outer traversal.
    """

    def __init__(self, tree: "NaryTree", start: Optional[NaryNode], version: Optional[int] = None) -> None:
        super().__init__(tree, version)
        self._stack: List[NaryNode] = [start] if start is not None else []

    def __next__(self) -> NaryNode:
        if not self._stack:
            raise StopIteration
        self._check()
        node = self._stack.pop()
        self._stack.extend(reversed(node.children))
        return node


def _matches(node: NaryNode, value: Any) -> bool:
    return node is value or node.value is value or node.value == value


def _index_of(children: List[NaryNode], target: NaryNode) -> int:
    for index, child in enumerate(children):
        if child is target:
            return index
    return -1


def _attribute_of(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    if hasattr(obj, key):
        return getattr(obj, key)
    getter = getattr(obj, "get_attribute", None)
    if callable(getter):
        result = getter(key)
        return _MISSING if result is None else result
    return _MISSING


class NaryTree:
    """
    An iterable ordered n-ary tree.

    Any node may have an arbitrary number of ordered children. Values are
    matched by identity first and equality second, so elements with
    identity equality stay distinct even when they share a name.

    Example:
        >>> tree = NaryTree()
        >>> tree.add("root")
        True
        >>> child = tree.add_as_last_child("child", tree.root)
        >>> [node.value for node in tree]
        ['root', 'child']
    """

    def __init__(self) -> None:
        self._root: Optional[NaryNode] = None
        self._size = 0
        self._mod_count = 0

    # ------------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> Optional[NaryNode]:
        return self._root

    @property
    def mod_count(self) -> int:
        """Structural version, incremented on every insert, removal and clear."""
        return self._mod_count

    def get_root_item(self) -> Any:
        """Return the value stored in the root node, or None for an empty tree."""
        return self._root.value if self._root is not None else None

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> LevelOrderIterator:
        return self.level_order()

    def __contains__(self, value: Any) -> bool:
        if value is None:
            return False
        return self.contains(value)

    def __repr__(self) -> str:
        return f"NaryTree(size={self._size}, height={self.height()})"

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add(self, value: Any) -> bool:
        """
        Add ``value`` as the root, or as the root's next child.

        Raises:
            QRArgumentError: If value is None
        """
        self._require_value(value, "add a node to the n-ary tree")
        node = NaryNode(value)
        if self._root is None:
            self._root = node
        else:
            self._root.children.append(node)
        self._size += 1
        self._touch()
        return True

    def add_as_first_child(self, value: Any, parent: NaryNode) -> NaryNode:
        """Insert ``value`` at the head of ``parent``'s children and return the new node."""
        return self.add_at_position(value, parent, 0)

    def add_as_last_child(self, value: Any, parent: NaryNode) -> NaryNode:
        """Insert ``value`` at the tail of ``parent``'s children and return the new node."""
        self._require_value(value, "add a node to the n-ary tree")
        self._require_member(parent)
        return self._insert(value, parent, len(parent.children))

    def add_at_position(self, value: Any, parent: NaryNode, position: int) -> NaryNode:
        """
        Insert ``value`` at the 0-indexed ``position`` within ``parent``'s children.

        Args:
            value: Object to store in the new node
            parent: Node that receives the child
            position: Index in ``[0, len(parent.children)]``

        Returns:
            The newly created node

        Raises:
            QRArgumentError: If value is None or parent is not a node of this tree
            QRRangeError: If position is outside the child list
        """
        self._require_value(value, "add a node to the n-ary tree")
        self._require_member(parent)
        if position < 0 or position > len(parent.children):
            raise QRRangeError(
                "Position out of range. A tree node can not be added at the specified position."
            )
        return self._insert(value, parent, position)

    def _insert(self, value: Any, parent: NaryNode, position: int) -> NaryNode:
        node = NaryNode(value)
        parent.children.insert(position, node)
        self._size += 1
        self._touch()
        return node

    def clear(self) -> bool:
        """Make this tree empty."""
        self._root = None
        self._size = 0
        self._touch()
        return True

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def contains(self, value: Any, parent: Optional[NaryNode] = None) -> bool:
        """
        Return True if ``value`` (or a node passed by identity) is in the tree.

        When ``parent`` is given, only the subtree rooted at it is searched.
        """
        self._require_value(value, "search the n-ary tree for an object")
        return self._find(lambda node: _matches(node, value), parent) is not None

    def get(self, value: Any) -> Any:
        """Return the first stored value matching ``value`` in level order, or None."""
        node = self.get_node(value)
        return node.value if node is not None else None

    def get_node(self, value: Any) -> Optional[NaryNode]:
        """Return the first node whose value matches ``value`` in level order, or None."""
        self._require_value(value, "search the n-ary tree for an object")
        return self._find(lambda node: node.value is value or node.value == value)

    def get_by_attribute(self, key: str, value: Any) -> Any:
        """Return the first stored value whose ``key`` attribute equals ``value``."""
        node = self.get_node_by_attribute(key, value)
        return node.value if node is not None else None

    def get_node_by_attribute(self, key: str, value: Any) -> Optional[NaryNode]:
        """Return the first node whose value has attribute ``key`` equal to ``value``."""
        self._require_value(key, "search the n-ary tree by attribute")
        self._require_value(value, "search the n-ary tree by attribute")

        def predicate(node: NaryNode) -> bool:
            found = _attribute_of(node.value, key)
            return found is not _MISSING and found == value

        return self._find(predicate)

    def _find(
        self,
        predicate: Callable[[NaryNode], bool],
        start: Optional[NaryNode] = None,
    ) -> Optional[NaryNode]:
        if start is not None:
            self._require_parent(start)
        origin = start if start is not None else self._root
        for node in self.level_order(origin):
            if predicate(node):
                return node
        return None

    def _owns(self, node: NaryNode) -> bool:
        return self._find(lambda candidate: candidate is node) is not None

    def _find_parent(self, target: NaryNode) -> Optional[NaryNode]:
        for node in self.level_order():
            if _index_of(node.children, target) != -1:
                return node
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self, node: Optional[NaryNode] = None) -> int:
        """
        Count nodes in the whole tree, or in the subtree rooted at ``node``.

        Raises:
            QRReferenceError: If node is not part of this tree
        """
        if node is None:
            return self._size
        if not self._owns(node):
            raise QRReferenceError("The specified nary-node was not found in this n-ary tree.")
        if node is self._root:
            return self._size
        return sum(1 for _ in self.level_order(node))

    def height(self, node: Optional[NaryNode] = None) -> int:
        """Return the number of levels from ``node`` (default root) to its deepest leaf."""
        if self._size == 0:
            return 0
        origin = node if node is not None else self._root
        if origin is None:
            return 0
        levels = 0
        frontier = [origin]
        while frontier:
            levels += 1
            frontier = [child for current in frontier for child in current.children]
        return levels

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def level_order(self, node: Optional[NaryNode] = None, version: Optional[int] = None) -> LevelOrderIterator:
        """Return a breadth-first iterator from ``node`` (default root)."""
        return LevelOrderIterator(self, node if node is not None else self._root, version)

    def pre_order(self, node: Optional[NaryNode] = None, version: Optional[int] = None) -> PreOrderIterator:
        """Return a depth-first, parent-first iterator from ``node`` (default root).

        Pass ``version`` to bind a nested traversal to an outer traversal's
        snapshot.
        """
        return PreOrderIterator(self, node if node is not None else self._root, version)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, value: Any = None, parent: Optional[NaryNode] = None) -> bool:
        """
        Remove the first node holding ``value``, keeping its children.

        Without a value the root is removed: its first child is promoted and
        the remaining root children are appended after the promoted node's
        own children. A removed node's children take its place in the
        parent's child list.

        Raises:
            QRReferenceError: If the value is not present
        """
        if value is None:
            return self._remove_root()
        target = self._find(lambda node: node.value is value or node.value == value, parent)
        if target is None:
            raise QRReferenceError("The specified object reference is not present in this n-ary tree.")
        return self._remove_keeping_children(target)

    def remove_node(self, node: Optional[NaryNode] = None) -> bool:
        """Remove ``node`` (default root), keeping its children. See ``remove``."""
        if node is None:
            return self._remove_root()
        self._require_parent(node)
        if not self._owns(node):
            raise QRReferenceError("The specified node reference is not present in this n-ary tree.")
        return self._remove_keeping_children(node)

    def remove_subtree(self, value: Any, parent: Optional[NaryNode] = None) -> bool:
        """
        Remove the first node holding ``value`` together with all its descendants.

        Raises:
            QRArgumentError: If value is None
            QRReferenceError: If the value is not present
        """
        self._require_value(value, "remove a sub-tree by object")
        target = self._find(lambda node: node.value is value or node.value == value, parent)
        if target is None:
            raise QRReferenceError("The specified object was not found in this n-ary tree.")
        return self._prune(target)

    def remove_node_subtree(self, node: NaryNode) -> bool:
        """Remove the subtree rooted at ``node``."""
        self._require_parent(node)
        if not self._owns(node):
            raise QRReferenceError("The specified object was not found in this n-ary tree.")
        return self._prune(node)

    def _remove_root(self) -> bool:
        previous = self._root
        if previous is None:
            raise QRReferenceError("An empty n-ary tree has no root node to remove.")
        if not previous.children:
            return self.clear()
        promoted = previous.children[0]
        promoted.children = promoted.children + previous.children[1:]
        previous.children = []
        self._root = promoted
        self._size -= 1
        self._touch()
        return True

    def _remove_keeping_children(self, target: NaryNode) -> bool:
        if target is self._root:
            return self._remove_root()
        parent = self._find_parent(target)
        if parent is None:
            raise QRReferenceError("The specified node reference is not present in this n-ary tree.")
        index = _index_of(parent.children, target)
        parent.children[index:index + 1] = target.children
        target.children = []
        self._size -= 1
        self._touch()
        return True

    def _prune(self, target: NaryNode) -> bool:
        if target is self._root:
            return self.clear()
        parent = self._find_parent(target)
        if parent is None:
            raise QRReferenceError("The specified object was not found in this n-ary tree.")
        removed = sum(1 for _ in self.level_order(target))
        del parent.children[_index_of(parent.children, target)]
        self._size -= removed
        self._touch()
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self, node: Optional[NaryNode] = None, level: int = 1) -> str:
        """Render the tree (or subtree) as an indented ``Level:N - value`` listing."""
        origin = node if node is not None else self._root
        if origin is None:
            return ""
        lines: List[str] = []
        stack = [(origin, level)]
        while stack:
            current, depth = stack.pop()
            lines.append(f"{' ' * (depth * 6)}Level:{depth} - {current.value}\n")
            stack.extend((child, depth + 1) for child in reversed(current.children))
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def to_dict(self, node: Optional[NaryNode] = None) -> Dict[str, Any]:
        """Return a nested ``{"value", "children"}`` structure for the tree or subtree."""
        origin = node if node is not None else self._root
        if origin is None:
            return {}
        result = self._node_dict(origin)
        stack = [(origin, result["children"])]
        while stack:
            current, target = stack.pop()
            for child in current.children:
                entry = self._node_dict(child)
                target.append(entry)
                stack.append((child, entry["children"]))
        return result

    @staticmethod
    def _node_dict(node: NaryNode) -> Dict[str, Any]:
        serializer = getattr(node.value, "to_dict", None)
        value = serializer() if callable(serializer) else node.value
        return {"value": value, "children": []}

    def to_json(self, node: Optional[NaryNode] = None, *, indent: Optional[int] = 2) -> str:
        """Return the ``to_dict`` structure encoded as JSON."""
        return json.dumps(self.to_dict(node), indent=indent, default=str)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _touch(self) -> None:
        self._mod_count += 1

    @staticmethod
    def _require_value(value: Any, action: str) -> None:
        if value is None:
            raise QRArgumentError(f"A valid child object must be specified to {action}.")

    @staticmethod
    def _require_parent(parent: Any) -> None:
        if not isinstance(parent, NaryNode):
            raise QRArgumentError(
                "A valid n-ary parent node must be specified to add or locate a node in the n-ary tree."
            )

    def _require_member(self, parent: Any) -> None:
        self._require_parent(parent)
        if not self._owns(parent):
            raise QRArgumentError("The specified parent node is not part of this n-ary tree.")


__all__ = [
    "NaryNode",
    "NaryTree",
    "LevelOrderIterator",
    "PreOrderIterator",
]
