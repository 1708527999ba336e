from . import bstree
from .. import log
from ..util import subtree_height
from ..exception import InvalidArgumentError, NotFoundError

_EMPTY = object()

class AVLTreeNode(bstree.BSTreeNode):
    """A node of an AVL Tree"""

    def __init__(self, value):
        super(AVLTreeNode, self).__init__(value)
        self.height = 0
        self.balance_factor = 0

    def update(self):
        """Update height and balance factor from the cached heights of the
        left and right childs.

        Time complexity: O(1)"""
        lh = subtree_height(self.left)
        rh = subtree_height(self.right)
        self.height = 1 + max(lh, rh)
        self.balance_factor = lh - rh

    def is_unbalanced(self):
        return self.balance_factor in (-2, 2)


class AVLTree(bstree.BSTree):
    """A height balanced (AVL) binary search tree of distinct values.

    The height of the two child subtrees of every node differs by at most
    one, so all operations descend at most O(lg n) levels."""

    def __init__(self, iterable=_EMPTY, node_type=AVLTreeNode):
        super(AVLTree, self).__init__(node_type)
        self._size = 0
        if iterable is None:
            raise InvalidArgumentError("sequence to construct the tree from is None")
        if iterable is not _EMPTY:
            for value in iterable:
                if value is None:
                    raise InvalidArgumentError(
                            "cannot add None from a sequence to the tree")
                self.add(value)
            log.debug1("constructed tree of ", self._size, " values")

    @classmethod
    def from_sequence(cls, data):
        return cls(data)

    def _left_rotate(self, x):
        """Perform a left rotation around node x, returns the new subtree root

        Time complexity: O(1)"""
        log.debug2("left rotation at ", x.value)
        y = x.right
        x.right = y.left
        y.left = x
        x.update()
        y.update()
        return y

    def _right_rotate(self, x):
        """Perform a right rotation around node x, returns the new subtree root

        Time complexity: O(1)"""
        log.debug2("right rotation at ", x.value)
        y = x.left
        x.left = y.right
        y.right = x
        x.update()
        y.update()
        return y

    def _rotate(self, x):
        """Restore the AVL property at node x whose balance factor is +/-2.

        Returns the root of the rebalanced subtree.
        Time complexity: O(1)"""
        if x.balance_factor == -2:
            if x.right.balance_factor == 1:
                x.right = self._right_rotate(x.right)
            x = self._left_rotate(x)
        elif x.balance_factor == 2:
            if x.left.balance_factor == -1:
                x.left = self._left_rotate(x.left)
            x = self._right_rotate(x)
        return x

    def _rebalance(self, x):
        x.update()
        if x.is_unbalanced():
            x = self._rotate(x)
        return x

    def add(self, value):
        """Insert value into the tree. Values already in the tree are ignored.

        Time complexity: O(lg n)"""
        self._check_value(value, "value to add")
        log.debug3("add ", value)
        self._root = self._add(self._root, value)

    def _add(self, x, value):
        if x is None:
            self._size += 1
            return self.node_type(value)
        if value < x.value:
            x.left = self._add(x.left, value)
        elif value > x.value:
            x.right = self._add(x.right, value)
        else:
            return x
        return self._rebalance(x)

    def remove(self, value):
        """Remove the value from the tree and return the value stored in it.

        A node with two childs takes over the value of its predecessor.
        Raises NotFoundError if value is not in the tree.
        Time complexity: O(lg n)"""
        self._check_value(value, "value to remove")
        root, removed = self._remove(self._root, value)
        if removed is None:
            raise NotFoundError(value)
        log.debug3("remove ", removed)
        self._root = root
        self._size -= 1
        return removed

    def _remove(self, x, value):
        """Returns (new subtree root, removed value or None)"""
        if x is None:
            return (None, None)
        if value < x.value:
            x.left, removed = self._remove(x.left, value)
        elif value > x.value:
            x.right, removed = self._remove(x.right, value)
        else:
            removed = x.value
            if x.left is None:
                return (x.right, removed)
            if x.right is None:
                return (x.left, removed)
            x.left, x.value = self._remove_predecessor(x.left)
        if removed is None:
            return (x, None)
        return (self._rebalance(x), removed)

    def _remove_predecessor(self, x):
        """Splice the maximum out of the subtree rooted at x.

        Returns (new subtree root, maximum value)"""
        if x.right is None:
            return (x.left, x.value)
        x.right, value = self._remove_predecessor(x.right)
        return (self._rebalance(x), value)

    def get(self, value):
        """Returns the value stored in the tree that equals value.

        Raises NotFoundError if value is not in the tree.
        Time complexity: O(lg n)"""
        self._check_value(value, "value to search for")
        found = self._get(self._root, value)
        if found is None:
            raise NotFoundError(value)
        return found

    def _get(self, x, value):
        if x is None:
            return None
        if value < x.value:
            return self._get(x.left, value)
        if value > x.value:
            return self._get(x.right, value)
        return x.value

    def contains(self, value):
        return self.find(value) is not None

    def __contains__(self, value):
        return self.contains(value)

    def successor(self, value):
        """Finds the smallest value in the tree that is larger than value.

        Returns None if value is the maximum.
        Raises NotFoundError if value is not in the tree.
        Time complexity: O(lg n)"""
        self._check_value(value, "value to find the successor of")
        found, succ = self._successor(self._root, value)
        if not found:
            raise NotFoundError(value)
        return succ

    def _successor(self, x, value):
        """Returns (value found, successor or None)"""
        if x is None:
            return (False, None)
        if value < x.value:
            found, succ = self._successor(x.left, value)
            # only the lowest left turn on the path counts
            if found and succ is None:
                succ = x.value
            return (found, succ)
        if value > x.value:
            return self._successor(x.right, value)
        if x.right is not None:
            return (True, self.minimum(x.right).value)
        return (True, None)

    def max_deepest_node(self):
        """Returns the value of the deepest node, preferring the right subtree
        on equal heights. Returns None if the tree is empty.

        Time complexity: O(lg n)"""
        x = self._root
        if x is None:
            return None
        while x.height > 0:
            if x.left is None:
                x = x.right
            elif x.right is None:
                x = x.left
            elif x.left.height > x.right.height:
                x = x.left
            else:
                x = x.right
        return x.value

    def height(self):
        """Returns the height of the tree, -1 if the tree is empty.

        Time complexity: O(1)"""
        return subtree_height(self._root)

    def clear(self):
        log.debug1("clearing tree of ", self._size, " values")
        self._root = None
        self._size = 0

    def size(self):
        """Returns the number of values stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def __len__(self):
        return self._size
