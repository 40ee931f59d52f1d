#!/usr/bin/env python
"""Solve a Letter Boxed puzzle.

Reads a dictionary and a letter box, finds all the 2-word chains that use
every letter (and 3-word chains if there aren't many of those), and writes
them shortest-first to an output file, one chain per line.
"""

import argparse
import sys
import time

from letterboxed.args import (
    add_standard_args,
    get_letter_box_from_args,
    get_trie_from_args,
)
from letterboxed.chain_search import find_all_solutions
from letterboxed.graph import build_graph_bucketed, num_edges
from letterboxed.letter_box import LetterBox
from letterboxed.ranker import rank_solutions, write_solutions
from letterboxed.trie import PyTrie


def elapsed_ms(start_s: float):
    return round(1000 * (time.time() - start_s))


def solve(
    trie: PyTrie,
    box: LetterBox,
    num_solutions: int | None = None,
    allow_repeats=True,
    num_threads=1,
    progress=False,
    verbose=False,
) -> list[list[str]]:
    """Run the whole search and return the ranked solutions."""

    def log(msg: str):
        if verbose:
            print(msg)

    log("Finding valid words...")
    start_s = time.time()
    valid_words = trie.find_valid_words(box)
    log(f"Found {len(valid_words)} valid words in {elapsed_ms(start_s)}ms")

    log("Creating directed graph...")
    start_s = time.time()
    graph = build_graph_bucketed(valid_words)
    log(
        f"Built directed graph with {num_edges(graph)} edges in {elapsed_ms(start_s)}ms"
    )

    solutions = find_all_solutions(
        graph,
        allow_repeats=allow_repeats,
        num_threads=num_threads,
        progress=progress,
        verbose=verbose,
    )
    return rank_solutions(solutions, num_solutions)


def main():
    parser = argparse.ArgumentParser(
        prog="Letter Boxed solver",
        description="Find short chains of words which use every letter on the box.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--output",
        type=str,
        default="solutions.txt",
        help="Where to write the solutions, one per line.",
    )
    parser.add_argument(
        "--num_solutions",
        type=int,
        default=None,
        help="Number of solutions to write. Default is all of them.",
    )
    parser.add_argument(
        "--no_repeats",
        action="store_true",
        help="Don't allow the same word to appear twice in a chain.",
    )
    parser.add_argument(
        "--num_threads",
        type=int,
        default=1,
        help="Number of processes to use for the chain search.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar during the chain search.",
    )
    args = parser.parse_args()

    print("Loading trie...")
    start_s = time.time()
    t = get_trie_from_args(args)
    print(f"Loaded trie with {t.size()} words in {elapsed_ms(start_s)}ms")

    print("Loading letterbox...")
    start_s = time.time()
    box = get_letter_box_from_args(args)
    print(f"Loaded letterbox in {elapsed_ms(start_s)}ms")

    solutions = solve(
        t,
        box,
        allow_repeats=not args.no_repeats,
        num_threads=args.num_threads,
        progress=args.progress,
        verbose=True,
    )
    num_solutions = len(solutions)
    if args.num_solutions is not None:
        num_solutions = min(args.num_solutions, num_solutions)

    print(f"Writing solutions to {args.output}...")
    write_solutions(solutions, args.output, num_solutions)
    sys.stderr.write(f"Wrote {num_solutions} solutions to {args.output}\n")


if __name__ == "__main__":
    main()
