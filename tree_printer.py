# Text views of a Cartesian tree. Everything here returns strings; writing
# them out is left to the caller.

from cartesian_tree import in_order, pre_order, verify, root_of


INDENT_WIDTH = 4


def _label(node):
    return f'val={node.value}, idx={node.position}'


def format_tree(tree):
    """
    Root-to-leaf view, one node per line, indented by depth:

        Root: val=1, idx=3
            L--- val=2, idx=1
            ...

    A node with a single child shows the missing side as `None`.
    """
    root = root_of(tree)
    if not root:
        return ''

    lines = []
    pending = [(root, 0, 'Root: ')]
    while pending:
        node, level, prefix = pending.pop()
        indent = ' ' * (level * INDENT_WIDTH)

        if node is None:
            lines.append(f'{indent}{prefix}None')
            continue

        lines.append(f'{indent}{prefix}{_label(node)}')

        if node.left or node.right:
            pending.append((node.right, level + 1, 'R--- '))
            pending.append((node.left, level + 1, 'L--- '))

    return '\n'.join(lines)


def _pass_fail(ok):
    return 'Pass' if ok else 'Fail'


def describe(tree, title):
    heap_ok, index_ok = verify(tree)
    in_order_values = ', '.join(str(value) for value, _ in in_order(tree))
    pre_order_pairs = ', '.join(f'({value}, idx={position})' for value, position in pre_order(tree))

    lines = [
        f'=== {title} ===',
        f'Original array: [{", ".join(str(value) for value in tree.sequence)}]',
        '',
        'Tree structure (Root at top, L=left, R=right):',
        format_tree(tree),
        '',
        'In-order traversal:',
        f'[{in_order_values}]',
        '',
        'Pre-order traversal:',
        f'[{pre_order_pairs}]',
        '',
        'Property Verification:',
        f'- Min-heap property: {_pass_fail(heap_ok)}',
        f'- BST index property: {_pass_fail(index_ok)}',
        f'- Cartesian Tree valid: {"Yes" if heap_ok and index_ok else "No"}',
    ]
    return '\n'.join(lines)
