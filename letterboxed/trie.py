from typing import Iterable, Self

MIN_WORD_LENGTH = 3


class PyTrie:
    _children: dict[str, Self]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = {}

    def starts_word(self, c: str):
        return c in self._children

    def descend(self, c: str):
        return self._children.get(c)

    def is_word(self):
        return self._is_word

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        """Insert word, returning the node that ends it."""
        node = self
        for c in word:
            child = node.descend(c)
            if child is None:
                child = node._children[c] = PyTrie()
            node = child
        node.set_is_word()
        return node

    def find_word(self, word: str):
        """Node reached by spelling out word, or None. This may be a prefix."""
        node = self
        for c in word:
            node = node.descend(c)
            if node is None:
                return None
        return node

    def contains_word(self, word: str) -> bool:
        node = self.find_word(word)
        return node is not None and node.is_word()

    def size(self):
        return (1 if self.is_word() else 0) + sum(
            c.size() for c in self._children.values()
        )

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children.values())

    def find_valid_words(self, box) -> list[str]:
        from letterboxed.valid_words import find_valid_words

        return find_valid_words(self, box)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """Words are inserted verbatim; filtering is up to the caller."""
        trie = PyTrie()
        for word in words:
            trie.add_word(word)
        return trie


def is_lexicon_word(word: str):
    return len(word) >= MIN_WORD_LENGTH


def make_py_trie(dict_input: str):
    with open(dict_input, encoding="utf-8") as f:
        contents = f.read()
    return PyTrie.create_from_wordlist(
        word for word in contents.splitlines() if is_lexicon_word(word)
    )
