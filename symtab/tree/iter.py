from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from . import base


class TreeIter(object):
    KEYS = 0
    VALS = 1
    ITEMS = 2
    NODES = 3

    def __init__(self, mode: int):
        self._mode: int = mode

    def __iter__(self) -> TreeIter:
        return self

    def __next__(self):
        cur_node = self._next_node()
        if cur_node is None:
            raise StopIteration()

        if self._mode == TreeIter.KEYS:
            return cur_node.key
        elif self._mode == TreeIter.VALS:
            return cur_node.value
        elif self._mode == TreeIter.ITEMS:
            return (cur_node.key, cur_node.value)
        elif self._mode == TreeIter.NODES:
            return cur_node

    def _next_node(self) -> Optional[base.TreeNode]:
        raise NotImplementedError()


class InOrderIter(TreeIter):
    """Ascending walk over the nodes whose keys fall within [lower, upper].

    Either bound may be None, meaning that side is unbounded. Subtrees that
    lie entirely outside the bounds are never visited. With ``leaves_only``
    set, only nodes without children are produced.
    """

    def __init__(
        self,
        mode: int,
        root: Optional[base.TreeNode],
        lower=None,
        upper=None,
        leaves_only: bool = False,
    ):
        super().__init__(mode)
        self._lower = lower
        self._upper = upper
        self._leaves_only: bool = leaves_only
        self._stack: List[base.TreeNode] = []

        if lower is not None and upper is not None and upper < lower:
            return
        self._push_left(root)

    def _push_left(self, node: Optional[base.TreeNode]):
        while node is not None:
            self._stack.append(node)
            if self._lower is not None and not (self._lower < node.key):
                # everything further left is below the range
                break
            node = node._left

    def _next_node(self) -> Optional[base.TreeNode]:
        while self._stack:
            node = self._stack.pop()

            if self._upper is not None and self._upper < node.key:
                # in-order successors are all larger still
                self._stack.clear()
                return None

            if self._upper is None or node.key < self._upper:
                self._push_left(node._right)

            if self._lower is not None and node.key < self._lower:
                continue
            if self._leaves_only and not node.is_leaf():
                continue
            return node

        return None


class LevelOrderIter(TreeIter):
    """Breadth-first walk, left child before right child on each level."""

    def __init__(self, mode: int, root: Optional[base.TreeNode]):
        super().__init__(mode)
        self._queue: Deque[Optional[base.TreeNode]] = deque([root])

    def _next_node(self) -> Optional[base.TreeNode]:
        while self._queue:
            node = self._queue.popleft()
            if node is None:
                continue
            self._queue.append(node._left)
            self._queue.append(node._right)
            return node

        return None
