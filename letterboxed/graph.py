"""Directed graph of which words can follow which in a chain.

There's an edge A -> B if B starts with the letter that A ends with (and A != B).
"""

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Graph = dict[str, set[str]]


def build_graph(valid_words: Sequence[str]) -> Graph:
    """Reference implementation: compare every pair of words."""
    graph: Graph = {}
    for word in valid_words:
        node = graph.setdefault(word, set())
        for new_word in valid_words:
            if word != new_word and word[-1] == new_word[0]:
                node.add(new_word)
    return graph


def group_by(seq: Sequence[T], fn: Callable[[T], R]) -> dict[R, list[T]]:
    out = dict[R, list[T]]()
    for v in seq:
        out.setdefault(fn(v), []).append(v)
    return out


def build_graph_bucketed(valid_words: Sequence[str]) -> Graph:
    """Same edges as build_graph, but linear in the number of edges."""
    by_first = group_by(valid_words, lambda word: word[0])
    graph: Graph = {}
    for word in valid_words:
        node = graph.setdefault(word, set())
        node.update(w for w in by_first.get(word[-1], []) if w != word)
    return graph


def num_edges(graph: Graph) -> int:
    return sum(len(nexts) for nexts in graph.values())
