"""Enumerate chains of words that use every letter on the box.

The search is a bounded-depth walk of the word graph from each starting word.
It's exponential in the chain length, so only 2- and 3-word chains are tried.
"""

import multiprocessing
import time
from typing import Sequence

from tqdm import tqdm

from letterboxed.graph import Graph

NUM_LETTERS = 12

# Only look for 3-word chains if there are fewer 2-word chains than this.
MIN_TWO_WORD_SOLUTIONS = 50


def generate_paths(
    graph: Graph, start: str, chain_length: int, allow_repeats=True
) -> list[list[str]]:
    """All walks of exactly chain_length words beginning with start."""
    assert chain_length >= 1
    return _paths(graph, [start], chain_length, allow_repeats)


def _paths(graph: Graph, prefix: list[str], chain_length: int, allow_repeats: bool):
    if len(prefix) == chain_length:
        return [[*prefix]]
    out = []
    # Sets iterate in hash order, which differs between processes.
    for word in sorted(graph[prefix[-1]]):
        if not allow_repeats and word in prefix:
            continue
        prefix.append(word)
        out += _paths(graph, prefix, chain_length, allow_repeats)
        prefix.pop()
    return out


def is_valid_solution(path: Sequence[str]) -> bool:
    return len({letter for word in path for letter in word}) == NUM_LETTERS


def solutions_from(
    graph: Graph, start: str, chain_length: int, allow_repeats=True
) -> list[list[str]]:
    return [
        path
        for path in generate_paths(graph, start, chain_length, allow_repeats)
        if is_valid_solution(path)
    ]


def search_init(graph: Graph, chain_length: int, allow_repeats: bool):
    # Read-only inputs for search_worker, set once per worker process.
    search_worker.graph = graph
    search_worker.chain_length = chain_length
    search_worker.allow_repeats = allow_repeats


def search_worker(start: str):
    return solutions_from(
        search_worker.graph,
        start,
        search_worker.chain_length,
        search_worker.allow_repeats,
    )


def find_solutions(
    graph: Graph,
    chain_length: int,
    allow_repeats=True,
    num_threads=1,
    progress=False,
) -> list[list[str]]:
    """Find all chain_length-word chains which use all the letters.

    Starting words are tried in graph order. With num_threads > 1, each
    starting word is searched in a separate process; results come back in
    the same order as the single-threaded search.
    """
    starts = [*graph.keys()]
    if num_threads > 1:
        pool = multiprocessing.Pool(
            num_threads, search_init, (graph, chain_length, allow_repeats)
        )
        with pool:
            it = pool.imap(search_worker, starts)
            per_start = [*tqdm(it, total=len(starts), disable=not progress)]
    else:
        per_start = [
            solutions_from(graph, start, chain_length, allow_repeats)
            for start in tqdm(starts, disable=not progress)
        ]
    return [path for paths in per_start for path in paths]


def find_all_solutions(
    graph: Graph,
    min_two_word_solutions=MIN_TWO_WORD_SOLUTIONS,
    allow_repeats=True,
    num_threads=1,
    progress=False,
    verbose=False,
) -> list[list[str]]:
    """2-word solutions, plus 3-word solutions if there aren't enough of those."""
    solutions = []
    for chain_length in (2, 3):
        if chain_length > 2 and len(solutions) >= min_two_word_solutions:
            break
        if verbose:
            print(f"Finding {chain_length} word solutions...")
        start_s = time.time()
        found = find_solutions(
            graph, chain_length, allow_repeats, num_threads, progress
        )
        elapsed_ms = round(1000 * (time.time() - start_s))
        if verbose:
            print(f"Found {len(found)} {chain_length} word solutions in {elapsed_ms}ms")
        solutions += found
    return solutions
