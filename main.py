"""Main entry point for the non-transitive dice game."""

import argparse
import logging
import sys

from parameters import EXAMPLE_DICE
from fairdice.console import ConsoleParty
from fairdice.dice import parse_dice
from fairdice.errors import (
    DiceConfigError,
    EntropyUnavailableError,
    GameAborted,
    ProtocolViolationError,
)
from fairdice.orchestrator import RoundOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play a round of non-transitive dice with provably fair rolls"
    )
    parser.add_argument(
        "dice",
        nargs="*",
        help="Dice as comma separated faces, e.g. 2,2,4,4,9,9",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print protocol debug output",
    )
    return parser


def usage_example() -> str:
    return f"Example: python main.py {' '.join(EXAMPLE_DICE)}"


def main(argv=None, input_fn=input) -> int:
    """Play one round. Returns the process exit status.

    Args:
        argv: Optional argument list (for programmatic use)
        input_fn: Line reader for the player's answers
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        dice = parse_dice(args.dice)
    except DiceConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        print(usage_example(), file=sys.stderr)
        return 1

    print("=== Non-Transitive Dice Game ===")
    print(f"Loaded {len(dice)} dice:")
    for i, die in enumerate(dice):
        print(f"  Die {i}: {die.label}")
    print("Enter ? at any prompt for the probability table, X to exit.")

    party = ConsoleParty(dice, input_fn=input_fn)
    orchestrator = RoundOrchestrator(dice, party)

    try:
        result = orchestrator.run()
    except (GameAborted, KeyboardInterrupt):
        print("\nThanks for playing! Goodbye!")
        return 0
    except ProtocolViolationError as e:
        print(f"\nRound aborted: {e}", file=sys.stderr)
        return 1
    except EntropyUnavailableError as e:
        print(f"\nFatal: {e}", file=sys.stderr)
        return 2

    print("\n=== Final Results ===")
    print(f"Computer's {result.computer_die.label} rolled: {result.computer_roll}")
    print(f"Your {result.player_die.label} rolled: {result.player_roll}")
    print("Run verify_draw.py with any key above to audit a draw.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
