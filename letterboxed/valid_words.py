"""Find all the dictionary words that can be spelled on a Letter Boxed frame.

A word is playable if every letter is on the box and no two consecutive
letters come from the same side. This walks the trie once per starting side,
only descending into letters from the other three sides.
"""

from letterboxed.letter_box import LetterBox


def find_valid_words(trie, box: LetterBox) -> list[str]:
    out = []
    for side_idx, side in enumerate(box.sides):
        for c in side:
            d = trie.descend(c)
            if d:
                _dfs(d, box, c, side_idx, out)
    # A letter on two sides can spell the same word twice.
    return [*dict.fromkeys(out)]


def _dfs(t, box: LetterBox, word: str, side_idx: int, out: list[str]):
    if t.is_word():
        out.append(word)

    for i, side in enumerate(box.sides):
        if i == side_idx:
            continue
        for c in side:
            d = t.descend(c)
            if d:
                _dfs(d, box, word + c, i, out)


def is_valid_word(word: str, box: LetterBox) -> bool:
    """Can word be spelled on the box? This agrees with find_valid_words."""
    sides = box.sides
    # Sides the most recent letter could have come from.
    possible = set(range(len(sides)))
    for n, c in enumerate(word):
        possible = {
            j
            for j, side in enumerate(sides)
            if c in side and (n == 0 or any(i != j for i in possible))
        }
        if not possible:
            return False
    return bool(word)
