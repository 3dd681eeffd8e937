"""Worked examples with linked lists, stacks, trees and graphs, and the command-line entry."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from algobook import dynamic, geometry, greedy, matrix, selection, sorting, subarray, substring
from algobook.graphs import (
    Bipartite,
    BreadthFirstSearch,
    DenseGraph,
    Edge,
    HamiltonPath,
    SimplePath,
    SparseMultiGraph,
    WeightedDenseGraph,
    WeightedEdge,
    random_graph,
)
from algobook.structures import BinaryTree, Node, Stack, count, height, reverse_cycle


def josephus(m: int, n: int) -> int:
    """Survivor when n people in a circle are eliminated every m-th, counting from 1."""
    if m < 1 or n < 1:
        raise ValueError("m and n must be positive")
    first = Node(1)
    first.next = first
    last = first
    for item in range(2, n + 1):
        last.insert_after(Node(item))
        assert last.next is not None
        last = last.next
    current = last
    while current.next is not current:
        for _ in range(m - 1):
            assert current.next is not None
            current = current.next
        current.delete_after()
    return current.item


def evaluate_postfix(expression: str) -> int:
    """Value of a postfix expression of single digits, '+' and '*'; other characters are skipped."""
    operands = Stack(len(expression))
    try:
        for char in expression:
            if char == "+":
                operands.push(operands.pop() + operands.pop())
            elif char == "*":
                operands.push(operands.pop() * operands.pop())
            elif "0" <= char <= "9":
                operands.push(int(char))
        return operands.pop()
    except IndexError:
        raise ValueError(f"malformed postfix expression: {expression!r}") from None


def infix_to_postfix(expression: str) -> str:
    """Convert a fully parenthesised infix expression of digits, '+' and '*' to postfix."""
    operators = Stack(len(expression))
    output: list[str] = []
    try:
        for char in expression:
            if "0" <= char <= "9":
                output.append(char)
            elif char in "+*":
                operators.push(char)
            elif char == ")":
                output.append(operators.pop())
    except IndexError:
        raise ValueError(f"unbalanced infix expression: {expression!r}") from None
    return "".join(output)


_INFIX = "(5*(((9+8)*(4*6))+7))"
_POSTFIX = "598+46**7+*"
_POSTFIX_VALUE = 2075


def _run_examples(rng: random.Random) -> tuple[list[str], bool]:
    lines = [f"Josephus survivor (m=8, n=9): {josephus(8, 9)}"]

    ring = Node(1)
    ring.next = ring
    current = ring
    for item in range(2, 6):
        current.insert_after(Node(item))
        assert current.next is not None
        current = current.next
    lines.append("Circular list: " + " ".join(map(str, current.cycle())))
    current.delete_after()
    lines.append("After deleting: " + " ".join(map(str, current.cycle())))
    assert current.next is not None
    lines.append("Reversed: " + " ".join(map(str, reverse_cycle(current.next).cycle())))

    value = evaluate_postfix(_POSTFIX)
    converted = infix_to_postfix(_INFIX)
    lines.append(f"Postfix {_POSTFIX} = {value}")
    lines.append(f"Infix {_INFIX} -> {converted}")
    check = value == _POSTFIX_VALUE and converted == _POSTFIX

    tree = BinaryTree(
        0,
        BinaryTree(1, BinaryTree(3), BinaryTree(4)),
        BinaryTree(2, BinaryTree(5), BinaryTree(6)),
    )
    nodes, depth = count(tree), height(tree)
    lines.append(f"Binary tree: {nodes} nodes, height {depth}")
    check = check and nodes == 7 and depth == 2

    dense = DenseGraph(10)
    sparse = SparseMultiGraph(10)
    for i in range(10):
        dense.insert(Edge(i, 2))
        sparse.insert(Edge(i, 2))
    lines.append(f"Dense graph: {dense.edge_count} edges; sparse multigraph: {sparse.edge_count}")

    graph = DenseGraph(4)
    random_graph(graph, 10, rng)
    lines.append(f"Path 0-3 in random graph: {SimplePath(graph, 0, 3).exists}")

    graph = DenseGraph(5)
    random_graph(graph, 6, rng)
    lines.append(f"Hamilton path 0-2 in random graph: {HamiltonPath(graph, 0, 2, 4).exists}")

    graph = DenseGraph(5)
    random_graph(graph, 6, rng)
    lines.append(f"Random graph bipartite: {Bipartite(graph).is_bipartite}")

    graph = DenseGraph(5)
    random_graph(graph, 6, rng)
    search = BreadthFirstSearch(graph)
    lines.append("BFS order: " + " ".join(str(search[v]) for v in range(graph.vertex_count)))

    weighted = WeightedDenseGraph(5)
    weighted.insert(WeightedEdge(0, 1, 0.5))
    lines.append(f"Weighted graph: {weighted.edge_count} edge")
    return lines, check


_BENCHMARKS = (
    ("sorting", lambda rng: sorting.run_benchmark(rng=rng)),
    ("subarray", lambda rng: subarray.run_benchmark(rng=rng)),
    ("selection", lambda rng: selection.run_benchmark(rng=rng)),
    ("dynamic", lambda rng: dynamic.run_benchmark(rng)),
    ("greedy", lambda rng: greedy.run_benchmark()),
    ("matrix", lambda rng: matrix.run_benchmark()),
    ("substring", lambda rng: substring.run_benchmark()),
    ("geometry", lambda rng: geometry.run_benchmark(rng)),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the examples, and optionally every benchmark; return 0 when all checks pass."""
    parser = argparse.ArgumentParser(
        prog="algobook", description="Run the data-structure and graph examples."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for random data")
    parser.add_argument(
        "--benchmarks", action="store_true", help="also time every algorithm family"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    ok = True
    if args.benchmarks:
        for _, run in _BENCHMARKS:
            report = run(rng)
            print(report)
            print()
            ok = ok and report.correct

    lines, check = _run_examples(rng)
    print("\n".join(lines))
    print("All data structures examples were launched!" if check else "Error!")
    return 0 if ok and check else 1