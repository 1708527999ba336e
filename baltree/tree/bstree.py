import collections

from ..exception import InvalidArgumentError


class BSTreeNode(object):
    """Abstract implementation of a binary search tree node."""

    def __init__(self, value):
        self.value = value

        self.left = None
        self.right = None

class BSTree(object):
    """Abstract implementation of a binary search tree.

    Subclasses own the root node in self._root and perform all structural
    changes. Everything here is read-only."""

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self._root = None

    @property
    def root(self):
        return self._root

    def _check_value(self, value, what):
        if value is None:
            raise InvalidArgumentError(what, " cannot be None")

    def find(self, value):
        """Finds the node holding value. Returns None if value is not found.

        Time complexity: O(lg n) (balanced)"""
        self._check_value(value, "value to find")
        x = self._root
        while x is not None and value != x.value:
            if value < x.value:
                x = x.left
            else:
                x = x.right
        return x

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        return self._inorder_recurse(self._root, f)

    def _inorder_recurse(self, x, f):
        if x is None:
            return
        self._inorder_recurse(x.left, f)
        f(x)
        self._inorder_recurse(x.right, f)

    def preorder(self, f):
        """Calls f(x) for every node x, parents before their children.

        Time complexity: O(n)
        """
        return self._preorder_recurse(self._root, f)

    def _preorder_recurse(self, x, f):
        if x is None:
            return
        f(x)
        self._preorder_recurse(x.left, f)
        self._preorder_recurse(x.right, f)

    def postorder(self, f):
        """Calls f(x) for every node x, children before their parents.

        Time complexity: O(n)
        """
        return self._postorder_recurse(self._root, f)

    def _postorder_recurse(self, x, f):
        if x is None:
            return
        self._postorder_recurse(x.left, f)
        self._postorder_recurse(x.right, f)
        f(x)

    def levelorder(self, f):
        """Breadth first traversal, calls f(x, depth) for every node x.

        Time complexity: O(n)
        """
        if self._root is None:
            return
        queue = collections.deque([(self._root, 0)])
        while queue:
            x, depth = queue.popleft()
            f(x, depth)
            if x.left is not None:
                queue.append((x.left, depth + 1))
            if x.right is not None:
                queue.append((x.right, depth + 1))

    def sortedvalues(self):
        values = []
        self.inorder(lambda x: values.append(x.value))
        return values

    def preorder_values(self):
        values = []
        self.preorder(lambda x: values.append(x.value))
        return values

    def postorder_values(self):
        values = []
        self.postorder(lambda x: values.append(x.value))
        return values

    def levelorder_values(self):
        values = []
        self.levelorder(lambda x, depth: values.append(x.value))
        return values

    def max_per_level(self):
        """Returns the largest value on every level, root level first.

        Time complexity: O(n)"""
        maxima = []
        def visit(x, depth):
            # the last node visited on a level is its rightmost, hence largest
            if depth == len(maxima):
                maxima.append(x.value)
            else:
                maxima[depth] = x.value
        self.levelorder(visit)
        return maxima

    def minimum(self, x=None):
        """Finds the node with the minimal value

        Returns None if tree is empty
        Time complexity: O(lg n) (balanced)"""
        if x is None:
            x = self._root
        if x is None:
            return None

        while x.left is not None:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum value

        Time complexity: O(lg n) (balanced)"""
        if x is None:
            x = self._root
        if x is None:
            return None

        while x.right is not None:
            x = x.right
        return x
