from letterboxed.trie import PyTrie, is_lexicon_word, make_py_trie


def test_trie():
    t = PyTrie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.is_word()

    assert t.size() == 6
    for word in ["agriculture", "culture", "boggle", "tea", "sea", "teapot"]:
        assert t.contains_word(word)

    assert not t.contains_word("teap")
    assert not t.contains_word("random")
    assert not t.contains_word("cultur")
    assert not t.contains_word("")

    # Prefixes are nodes, but not words.
    assert t.find_word("teap") is not None
    assert t.find_word("random") is None

    wd = t.descend("t")
    assert wd is not None
    wd = wd.descend("e")
    assert wd is not None
    wd = wd.descend("a")
    assert wd is not None
    assert wd.is_word()
    assert wd is t.find_word("tea")
    assert t.starts_word("a")
    assert not t.starts_word("z")


def test_prefixes_are_not_words():
    words = ["hello", "help", "helper"]
    t = PyTrie.create_from_wordlist(words)
    for word in words:
        assert t.contains_word(word)
        for i in range(len(word)):
            prefix = word[:i]
            assert t.contains_word(prefix) == (prefix in words)


def test_add_word_returns_end_node():
    t = PyTrie()
    node = t.add_word("hello")
    assert node.is_word()
    assert node is t.find_word("hello")
    # Adding a word twice doesn't create new nodes.
    n = t.num_nodes()
    assert t.add_word("hello") is node
    assert t.num_nodes() == n == 6
    assert t.size() == 1


def test_empty_trie():
    t = PyTrie()
    assert not t.contains_word("hello")
    assert t.size() == 0
    assert t.num_nodes() == 1


def test_is_lexicon_word():
    assert is_lexicon_word("cat")
    assert not is_lexicon_word("an")
    assert not is_lexicon_word("")
    # No normalization happens.
    assert is_lexicon_word("Cat")


def test_load_file():
    t = make_py_trie("testdata/words.txt")
    assert not t.is_word()
    assert t.size() == 15
    assert t.contains_word("frantic")
    assert t.contains_word("zoo")
    assert not t.contains_word("an")
    assert not t.contains_word("frant")


def test_load_file_verbatim(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Hello\r\nab\n  cat\nnaïve\n", encoding="utf-8")
    t = make_py_trie(str(path))
    assert t.contains_word("Hello")
    assert not t.contains_word("hello")
    assert t.contains_word("  cat")
    assert not t.contains_word("ab")
    assert t.contains_word("naïve")
    assert t.size() == 3
