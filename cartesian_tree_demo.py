import sys

import cartesian_tree
from cartesian_tree import CartesianTreeError
from tree_printer import describe


"""
Builds Cartesian trees and prints a report for each one.

With no arguments it walks through a fixed set of examples. Otherwise the
positional arguments are the integer sequence to build from, optionally
followed by `--query LO HI` to answer one range-minimum query.

sample usage:

python3 cartesian_tree_demo.py
python3 cartesian_tree_demo.py 4 2 6 1 5 3 --query 1 4
"""


EXAMPLES = (
    ('Example 1: Standard Cartesian Tree', (5, 10, 40, 30, 28)),
    ('Example 2: Mixed Sequence', (9, 3, 7, 1, 8, 12, 10, 20, 15, 18, 5)),
    ('Example 4a: Sorted Array (Right-skewed)', (1, 2, 3, 4, 5)),
    ('Example 4b: Reverse Sorted Array (Left-skewed)', (5, 4, 3, 2, 1)),
)

RMQ_SEQUENCE = (3, 2, 6, 1, 9, 7, 8)
RMQ_QUERIES = ((0, 3), (2, 5), (1, 6), (0, 6))


def format_query(tree, lo, hi):
    node = cartesian_tree.range_minimum_node(tree, lo, hi)
    return f'RMQ({lo}, {hi}) = {node.value} at idx={node.position}'


def run_examples():
    for title, sequence in EXAMPLES[:2]:
        print(describe(cartesian_tree.build(sequence), title))
        print()

    print('=== Example 3: Range Minimum Queries ===')
    tree = cartesian_tree.build(RMQ_SEQUENCE)
    for lo, hi in RMQ_QUERIES:
        expected = min(RMQ_SEQUENCE[lo: hi + 1])
        print(f'{format_query(tree, lo, hi)} (expected: {expected})')
    print()

    for title, sequence in EXAMPLES[2:]:
        print(describe(cartesian_tree.build(sequence), title))
        print()


def parse_args(argv):
    """Split argv into (values, query) where query is None or a (lo, hi) pair."""
    query = None
    if '--query' in argv:
        idx = argv.index('--query')
        bounds = argv[idx + 1:]
        if len(bounds) != 2:
            raise ValueError('--query takes exactly two positions: LO HI')
        query = int(bounds[0]), int(bounds[1])
        argv = argv[:idx]

    return [int(arg) for arg in argv], query


def main(argv):
    if not argv:
        run_examples()
        return 0

    try:
        values, query = parse_args(argv)
        tree = cartesian_tree.build(values)
        print(describe(tree, 'Input Sequence'))
        if query is not None:
            print()
            print(format_query(tree, *query))
    except (ValueError, CartesianTreeError) as ex:
        print('Error: ', ex, file=sys.stderr)
        return 2

    return 0


def run():
    sys.exit(main(sys.argv[1:]))


if __name__ == '__main__':
    run()
