from .base import BasicBST, TreeNode, InvalidArgumentError, EmptyTreeError
from .iter import TreeIter, InOrderIter, LevelOrderIter
