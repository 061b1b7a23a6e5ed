"""Simulate many fair rounds and compare empirical win rates with the matrix."""

import argparse
import os
import random
import sys
from collections import defaultdict

import matplotlib.pyplot as plt

from parameters import EXAMPLE_DICE, NUM_SIMULATIONS
from fairdice.dice import Die, parse_dice
from fairdice.errors import DiceConfigError
from fairdice.game_state import Outcome
from fairdice.orchestrator import RoundOrchestrator
from fairdice.parties import FixedChoiceParty
from fairdice.probability import format_probability, probability_matrix


def simulate_rounds(
    dice: list[Die], num_rounds: int, rng: random.Random | None = None
) -> tuple[dict, int]:
    """Play num_rounds automated rounds, cycling the player's preferred die.

    Returns:
        (results, failed_verifications) where results maps
        (player_die, computer_die) to {"player_wins", "computer_wins", "ties"}
    """
    rng = rng if rng is not None else random.Random()
    results = defaultdict(lambda: {"player_wins": 0, "computer_wins": 0, "ties": 0})
    failed_verifications = 0

    for i in range(num_rounds):
        party = FixedChoiceParty(dice[i % len(dice)], rng=rng)
        result = RoundOrchestrator(dice, party).run()
        failed_verifications += party.failed_verifications

        counts = results[(result.player_die, result.computer_die)]
        if result.outcome == Outcome.PLAYER_WINS:
            counts["player_wins"] += 1
        elif result.outcome == Outcome.COMPUTER_WINS:
            counts["computer_wins"] += 1
        else:
            counts["ties"] += 1

    return dict(results), failed_verifications


def plot_probability_matrix(dice: list[Die], plot_path: str):
    """Save a heatmap of P(row beats column).

    Args:
        dice: Dice pool
        plot_path: Output image path
    """
    matrix = probability_matrix(dice)
    labels = [str(die) for die in dice]
    values = [[float("nan") if p is None else p for p in row] for row in matrix]

    fig, ax = plt.subplots(figsize=(2 + 1.5 * len(dice), 1.5 + 1.5 * len(dice)))
    image = ax.imshow(values, cmap="RdYlGn", vmin=0.0, vmax=1.0)
    ax.set_xticks(range(len(dice)))
    ax.set_yticks(range(len(dice)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_yticklabels(labels)
    ax.set_xlabel("Opponent die")
    ax.set_ylabel("Player die")
    ax.set_title("P(row die beats column die)")

    for i, row in enumerate(matrix):
        for j, p in enumerate(row):
            ax.text(j, i, format_probability(p), ha="center", va="center")

    fig.colorbar(image, ax=ax)
    plt.tight_layout()

    directory = os.path.dirname(plot_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(plot_path, dpi=150)
    print(f"Probability heatmap saved to {plot_path}")

    plt.close(fig)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate non-transitive dice rounds with fair draws"
    )
    parser.add_argument(
        "dice",
        nargs="*",
        default=EXAMPLE_DICE,
        help="Dice as comma separated faces (defaults to a classic set)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=NUM_SIMULATIONS,
        help="Number of rounds to simulate",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the automated player's choices (draws stay secure)",
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Save a heatmap of the probability matrix to this path",
    )
    args = parser.parse_args(argv)

    try:
        dice = parse_dice(args.dice)
    except DiceConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print("=== Non-Transitive Dice Simulation ===\n")
    print(f"Running {args.rounds} rounds with {len(dice)} dice...")
    print("=" * 60)

    results, failed = simulate_rounds(dice, args.rounds, random.Random(args.seed))
    matrix = probability_matrix(dice)
    index = {die: i for i, die in enumerate(dice)}

    print("\n" + "=" * 60)
    print("SIMULATION RESULTS")
    print("=" * 60)
    for (player_die, computer_die), counts in sorted(
        results.items(), key=lambda item: (index[item[0][0]], index[item[0][1]])
    ):
        total = counts["player_wins"] + counts["computer_wins"] + counts["ties"]
        expected = matrix[index[player_die]][index[computer_die]]
        win_rate = counts["player_wins"] / total
        print(f"\n  Player {player_die.label} vs Computer {computer_die.label} ({total} rounds):")
        print(f"    Player wins:   {counts['player_wins']}/{total} ({win_rate * 100:.1f}%)")
        print(f"    Computer wins: {counts['computer_wins']}/{total}")
        print(f"    Ties:          {counts['ties']}/{total}")
        print(f"    Expected P(player wins): {format_probability(expected)}")

    print(f"\nFailed draw verifications: {failed}")
    print("=" * 60)

    if args.plot:
        plot_probability_matrix(dice, args.plot)

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
