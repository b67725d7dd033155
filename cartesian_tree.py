# Cartesian tree over a sequence: a min-heap on values that is also a
# binary search tree on positions, so in-order traversal gives back the
# sequence and the shallowest node inside a range holds the range minimum.


class CartesianTreeError(Exception):
    pass


class InvalidRange(CartesianTreeError, ValueError):
    pass


class EmptyTree(CartesianTreeError):
    pass


class Node:

    def __init__(self, value, position, left=None, right=None):
        self.value = value
        self.position = position
        self.left = left
        self.right = right

    def __str__(self):
        def _value(node):
            return node.value if node else None
        return f'({self.value}@{self.position}) -> ({_value(self.left)}, {_value(self.right)})'


class CartesianTree:

    def __init__(self, sequence=()):
        self.sequence = tuple(sequence)
        self.root = build_root(self.sequence)

    def __len__(self):
        return len(self.sequence)

    def __repr__(self):
        return f'CartesianTree({list(self.sequence)!r})'


def build(sequence) -> CartesianTree:
    return CartesianTree(sequence)


def build_root(sequence):
    """
    Link one node per element with a monotonic stack, in O(n).

    The stack holds the right spine of the tree built so far, values
    non-decreasing from bottom to top. A new element pops every node whose
    value is >= its own; the last one popped already owns the others and
    becomes the new node's left child. Equal values therefore sink below the
    later occurrence.
    """
    stack = []

    for position, value in enumerate(sequence):
        node = Node(value, position)
        last_popped = None

        while stack and stack[-1].value >= value:
            last_popped = stack.pop()

        node.left = last_popped
        if stack:
            stack[-1].right = node

        stack.append(node)

    return stack[0] if stack else None


def root_of(tree):
    if tree is None or isinstance(tree, Node):
        return tree
    return tree.root


def in_order(tree):
    node = root_of(tree)
    pending = []

    while pending or node:
        while node:
            pending.append(node)
            node = node.left

        node = pending.pop()
        yield node.value, node.position
        node = node.right


def pre_order(tree):
    root = root_of(tree)
    if not root:
        return

    pending = [root]
    while pending:
        node = pending.pop()
        yield node.value, node.position

        # right goes on first so the left subtree comes out first
        if node.right:
            pending.append(node.right)
        if node.left:
            pending.append(node.left)


def range_minimum_node(tree: CartesianTree, lo: int, hi: int) -> Node:
    """
    Return the node holding the minimum of positions lo..hi (inclusive).

    This is the lowest common ancestor of the range: walking down from the
    root, the first node whose position falls inside [lo, hi] dominates every
    other position in the range. Runs in O(height), which is O(n) for sorted
    input.
    """
    if tree.root is None:
        raise EmptyTree('range query on an empty tree')

    n = len(tree)
    if not 0 <= lo <= hi < n:
        raise InvalidRange(f'invalid range [{lo}, {hi}] for a tree of {n} elements')

    node = tree.root
    while not lo <= node.position <= hi:
        node = node.left if node.position > hi else node.right

    return node


def range_minimum(tree: CartesianTree, lo: int, hi: int):
    return range_minimum_node(tree, lo, hi).value


def _heap_ok(root):
    pending = [root] if root else []

    while pending:
        node = pending.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.value < node.value:
                return False
            pending.append(child)

    return True


def _index_ok(root):
    # None stands for an open bound
    pending = [(root, None, None)] if root else []

    while pending:
        node, t_min, t_max = pending.pop()

        if t_min is not None and node.position <= t_min:
            return False
        if t_max is not None and node.position >= t_max:
            return False

        if node.left:
            pending.append((node.left, t_min, node.position))
        if node.right:
            pending.append((node.right, node.position, t_max))

    return True


def verify(tree):
    """Check the heap and index invariants, returning (heap_ok, index_ok)."""
    root = root_of(tree)
    return _heap_ok(root), _index_ok(root)


def is_cartesian_tree(tree):
    heap_ok, index_ok = verify(tree)
    return heap_ok and index_ok
