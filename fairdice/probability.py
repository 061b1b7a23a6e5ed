"""Win probability calculations for the help table."""

from itertools import product

from parameters import PROBABILITY_DECIMALS
from fairdice.dice import Die


def win_probability(a: Die, b: Die) -> float:
    """
    Calculate P(a > b): probability that die a rolls strictly higher than die b.

    P(a > b) = COUNT{(x, y) in faces(a) x faces(b) : x > y} / (|a| * |b|)

    Where:
    - every face of a is paired with every face of b (all outcomes equally likely)
    - ties count as neither a win nor a loss

    Args:
        a: Die whose wins are counted
        b: Opposing die

    Returns:
        Probability that a beats b (0.0 to 1.0)
    """
    wins = sum(1 for x, y in product(a.faces, b.faces) if x > y)
    return wins / (len(a) * len(b))


def probability_matrix(dice: list[Die]) -> list[list[float | None]]:
    """Square matrix where cell [i][j] is P(dice[i] beats dice[j]).

    Self-pairs are None because a die never plays against itself.
    """
    return [
        [None if i == j else win_probability(row, col) for j, col in enumerate(dice)]
        for i, row in enumerate(dice)
    ]


def format_probability(p: float | None) -> str:
    """Render a matrix cell: fixed decimals, or "-" when not applicable."""
    if p is None:
        return "-"
    return f"{p:.{PROBABILITY_DECIMALS}f}"
