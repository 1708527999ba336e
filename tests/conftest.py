import io

from pytest import fixture

from baltree import AVLTree
from baltree import log


def _check_subtree(x, lower, upper):
    """Returns (height, size) of the subtree at x, asserting AVL and order
    properties on every node."""
    if x is None:
        return (-1, 0)
    if lower is not None:
        assert x.value > lower
    if upper is not None:
        assert x.value < upper
    lh, ls = _check_subtree(x.left, lower, x.value)
    rh, rs = _check_subtree(x.right, x.value, upper)
    assert x.height == 1 + max(lh, rh)
    assert x.balance_factor == lh - rh
    assert x.balance_factor in (-1, 0, 1)
    return (x.height, ls + rs + 1)


@fixture
def verify():
    def check(tree):
        height, size = _check_subtree(tree.root, None, None)
        assert height == tree.height()
        assert size == tree.size()
        assert (tree.root is None) == (tree.size() == 0)
    return check


@fixture
def scenario():
    return AVLTree([30, 20, 40, 10, 25])


@fixture
def logbuf(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(log, 'logger',
                        log.Logger(log.LOG_DEBUG3, buf, colors='never'))
    return buf
