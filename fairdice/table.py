"""Probability table rendering for the help screen."""

from tabulate import tabulate

from fairdice.dice import Die
from fairdice.probability import format_probability, probability_matrix


def render_probability_table(dice: list[Die]) -> str:
    """Grid of P(row die beats column die), with "-" on the diagonal."""
    matrix = probability_matrix(dice)
    headers = ["User dice v"] + [str(die) for die in dice]
    rows = [
        [str(die)] + [format_probability(p) for p in matrix[i]]
        for i, die in enumerate(dice)
    ]
    return tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)


def help_text(dice: list[Die]) -> str:
    """Full help screen: title, table and key."""
    return "\n".join(
        [
            "",
            "=== Probability Table ===",
            render_probability_table(dice),
            "",
            "Key:",
            "- Each cell shows the probability of the ROW die beating the COLUMN die",
            '- "-" marks a die compared with itself',
            "",
        ]
    )
