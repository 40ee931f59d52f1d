from typing import Sequence


def rank_solutions(
    solutions: Sequence[list[str]], num_solutions: int | None = None
) -> list[list[str]]:
    """Shortest chains first. Ties keep the order in which they were found."""
    if num_solutions is None:
        num_solutions = len(solutions)
    assert 0 <= num_solutions <= len(solutions)
    return sorted(solutions, key=len)[:num_solutions]


def format_solutions(solutions: Sequence[list[str]]) -> str:
    return "\n".join(" ".join(solution) for solution in solutions)


def write_solutions(
    solutions: Sequence[list[str]], path: str, num_solutions: int | None = None
):
    text = format_solutions(rank_solutions(solutions, num_solutions))
    with open(path, "w", encoding="utf-8") as out:
        out.write(text)
