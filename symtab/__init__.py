from . import tree

from .tree import BasicBST, TreeNode, InvalidArgumentError, EmptyTreeError

__all__ = [
    "BasicBST",
    "TreeNode",
    "InvalidArgumentError",
    "EmptyTreeError",
]
