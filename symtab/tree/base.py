from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from typing import Deque, Generic, TypeVar, Optional, Iterator, Tuple, Type

from .iter import InOrderIter, LevelOrderIter, TreeIter

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

_MISSING = object()


class InvalidArgumentError(ValueError):
    """Raised when a key, value or range bound is None."""


class EmptyTreeError(IndexError):
    """Raised when an ordered query needs at least one key."""


class TreeNode(Generic[K, V]):
    def __init__(self, key: K, value: V):
        self._key: K = key
        self.value: V = value

        self_cls = self.__class__

        self._left: Optional[self_cls[K, V]] = None
        self._right: Optional[self_cls[K, V]] = None
        self._size: int = 1

    @property
    def key(self) -> K:
        """The key associated with this node.

        This property is immutable.
        """
        return self._key

    @property
    def size(self) -> int:
        """Number of nodes in the subtree rooted here, this one included."""
        return self._size

    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def _resize(self):
        self._size = 1 + _subtree_size(self._left) + _subtree_size(self._right)

    def _find_node(self, key: K) -> Optional[TreeNode[K, V]]:
        node = self
        while node is not None:
            if key == node.key:
                return node
            elif key < node.key:
                node = node._left
            else:
                node = node._right
        return None

    def _insert_node(self, key: K, value: V) -> Tuple[bool, TreeNode[K, V]]:
        path = []
        node = self

        while True:
            path.append(node)
            if key == node.key:
                node.value = value
                return (False, node)

            if key < node.key:
                if node._left is None:
                    new_node = self.__class__(key, value)
                    node._left = new_node
                    break
                node = node._left
            else:
                if node._right is None:
                    new_node = self.__class__(key, value)
                    node._right = new_node
                    break
                node = node._right

        for visited in reversed(path):
            visited._resize()

        return (True, new_node)

    def _height(self) -> int:
        # count levels breadth-first; a lone node is height 0
        height = -1
        level: Deque[TreeNode[K, V]] = deque([self])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node._left is not None:
                    level.append(node._left)
                if node._right is not None:
                    level.append(node._right)
        return height

    def _min_node(self) -> TreeNode[K, V]:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def _max_node(self) -> TreeNode[K, V]:
        node = self
        while node._right is not None:
            node = node._right
        return node

    def _print_iterative(self) -> str:
        ret = ""
        stack = []
        node, level = self, 0

        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                node, level = node._left, level + 1

            node, level = stack.pop()
            ret += ("    " * level) + node._print_node() + "\n"
            node, level = node._right, level + 1

        return ret

    # methods for subclasses to override:

    def _print_node(self) -> str:
        return str(self.key)


def _subtree_size(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return node._size


class BasicBST(Generic[K, V], Mapping):
    """An ordered symbol table backed by an unbalanced binary search tree.

    Putting a key that is already present replaces its value. Values may not
    be None, and there is no way to remove a key once it has been put. Shape
    (and therefore height) depends only on insertion order.
    """

    def __init__(self, node_class: Type[TreeNode] = TreeNode):
        self._node_cls = node_class
        self._root: Optional[TreeNode[K, V]] = None

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return _subtree_size(self._root)

    def get_node(self, key: K) -> Optional[TreeNode[K, V]]:
        """Directly retrieve a node within this tree, or None if the key is
        not present.
        """
        if key is None:
            raise InvalidArgumentError("calls get() with a None key")
        if self._root is None:
            return None
        return self._root._find_node(key)

    def contains(self, key: K) -> bool:
        if key is None:
            raise InvalidArgumentError("argument to contains() is None")
        return self.get_node(key) is not None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self.get_node(key)
        if node is None:
            return default
        return node.value

    def put(self, key: K, value: V):
        """Associate ``value`` with ``key``, replacing any previous value.

        Raises InvalidArgumentError if either argument is None; a None value
        is not treated as a deletion.
        """
        if key is None:
            raise InvalidArgumentError("calls put() with a None key")
        if value is None:
            raise InvalidArgumentError(
                "calls put() with a None value, delete not implemented"
            )

        if self._root is None:
            self._root = self._node_cls(key, value)
            created_new = True
        else:
            created_new, _ = self._root._insert_node(key, value)

        if created_new:
            logger.debug("inserted key %r (size=%d)", key, self.size())
        else:
            logger.debug("overwrote value for key %r", key)

    def min(self) -> K:
        if self._root is None:
            raise EmptyTreeError("calls min() with empty symbol table")
        return self._root._min_node().key

    def max(self) -> K:
        if self._root is None:
            raise EmptyTreeError("calls max() with empty symbol table")
        return self._root._max_node().key

    def height(self, key=_MISSING) -> int:
        """Height of the whole tree, or of the subtree holding ``key``.

        An empty tree, and a key that is not present, both have height -1; a
        leaf has height 0. The height of a key is measured down from its own
        node, not from the root.
        """
        if key is _MISSING:
            node = self._root
        else:
            if key is None:
                raise InvalidArgumentError("calls height() with a None key")
            node = self.get_node(key)

        if node is None:
            return -1
        return node._height()

    def _do_iter(self, mode: int, lo=_MISSING, hi=_MISSING) -> TreeIter:
        if lo is _MISSING and hi is _MISSING:
            return InOrderIter(mode, self._root)
        if lo is _MISSING or hi is _MISSING:
            raise TypeError("range queries take both lo and hi, or neither")
        if lo is None:
            raise InvalidArgumentError("lower bound of range query is None")
        if hi is None:
            raise InvalidArgumentError("upper bound of range query is None")

        return InOrderIter(mode, self._root, lo, hi)

    def keys(self, lo=_MISSING, hi=_MISSING) -> Iterator[K]:
        """Keys in ascending order, limited to ``lo <= key <= hi`` when both
        bounds are given.
        """
        return self._do_iter(TreeIter.KEYS, lo, hi)

    def values(self, lo=_MISSING, hi=_MISSING) -> Iterator[V]:
        return self._do_iter(TreeIter.VALS, lo, hi)

    def items(self, lo=_MISSING, hi=_MISSING) -> Iterator[Tuple[K, V]]:
        return self._do_iter(TreeIter.ITEMS, lo, hi)

    def level_order(self) -> Iterator[K]:
        return LevelOrderIter(TreeIter.KEYS, self._root)

    def leaves(self) -> Iterator[K]:
        return InOrderIter(TreeIter.KEYS, self._root, leaves_only=True)

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_iterative()
        else:
            return "<empty tree>"

    def __getitem__(self, key: K) -> V:
        node = self.get_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: K, val: V):
        self.put(key, val)

    def __contains__(self, key: K) -> bool:
        if key is None:
            return False
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return "{}(size={})".format(self.__class__.__name__, self.size())
