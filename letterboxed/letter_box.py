"""The four-sided Letter Boxed frame."""

from dataclasses import dataclass, field
from typing import Self

SIDE_NAMES = ("top", "bottom", "left", "right")


@dataclass(frozen=True)
class LetterBox:
    top: str
    bottom: str
    left: str
    right: str
    letters: frozenset[str] = field(init=False)

    def __post_init__(self):
        # frozen, so bypass __setattr__ for the derived field.
        object.__setattr__(self, "letters", frozenset("".join(self.sides)))

    @property
    def sides(self) -> tuple[str, str, str, str]:
        return (self.top, self.bottom, self.left, self.right)

    def side_of(self, c: str) -> int | None:
        for i, side in enumerate(self.sides):
            if c in side:
                return i
        return None

    def __str__(self):
        return "\n".join(self.sides)

    @staticmethod
    def from_sides(top: str, bottom: str, left: str, right: str) -> Self:
        return LetterBox(top, bottom, left, right)

    @staticmethod
    def parse(text: str) -> Self:
        """Parse four lines: top, bottom, left, right. Extra lines are ignored."""
        lines = text.splitlines()
        if len(lines) < len(SIDE_NAMES):
            raise ValueError(
                f"Letter box needs {len(SIDE_NAMES)} lines "
                f"({', '.join(SIDE_NAMES)}), got {len(lines)}"
            )
        top, bottom, left, right = lines[:4]
        return LetterBox(top, bottom, left, right)


def read_letterbox(path: str) -> LetterBox:
    with open(path, encoding="utf-8") as f:
        return LetterBox.parse(f.read())
