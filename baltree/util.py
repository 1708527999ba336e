import math

def subtree_height(node):
    """Returns the cached height of node, -1 for an absent subtree."""
    return node.height if node is not None else -1

def height_bound(n):
    """Upper bound on the height of an AVL tree holding n elements."""
    return 1.45 * math.log2(n + 2) - 1
