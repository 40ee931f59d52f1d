"""Standard command-line arguments shared by the letterboxed tools."""

import argparse

from letterboxed.letter_box import LetterBox, read_letterbox
from letterboxed.trie import PyTrie, make_py_trie


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlist.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--letterbox",
        type=str,
        default="letterbox.in",
        help="Path to letter box file with four lines: top, bottom, left, right.",
    )


def get_trie_from_args(args: argparse.Namespace) -> PyTrie:
    t = make_py_trie(args.dictionary)
    assert t
    return t


def get_letter_box_from_args(args: argparse.Namespace) -> LetterBox:
    return read_letterbox(args.letterbox)
