from .version import version_str
from .exception import BalancedTreeError, InvalidArgumentError, NotFoundError
from .tree.avltree import AVLTree, AVLTreeNode

__version__ = version_str()
