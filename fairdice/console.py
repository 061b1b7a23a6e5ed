"""Console collaborator: prompts the player and narrates the round."""

import logging

from fairdice.dice import Die
from fairdice.errors import GameAborted
from fairdice.fair_draw import Committed, Revealed
from fairdice.game_state import Outcome
from fairdice.table import help_text

logger = logging.getLogger(__name__)

HELP_KEY = "?"
EXIT_KEY = "X"


class ConsoleParty:
    """Plays the human side of a round over stdin/stdout.

    "?" prints the probability table and "X" exits (after confirmation) at any
    prompt. Neither changes the round: after help the same prompt is shown
    again.
    """

    def __init__(self, dice: list[Die], input_fn=input):
        """
        Args:
            dice: Full dice pool, used for the help table
            input_fn: Line reader (replaced in tests)
        """
        self.dice = list(dice)
        self.input_fn = input_fn

    def _read(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt)
        except EOFError as e:
            raise GameAborted("Input closed") from e

    def show_help(self):
        print(help_text(self.dice))

    def prompt(self, options: list[str], menu: str) -> str:
        """Read until the player enters one of options. Handles help and exit."""
        while True:
            choice = self._read("Your selection: ").strip().upper()

            if choice == HELP_KEY:
                self.show_help()
                continue

            if choice == EXIT_KEY:
                confirm = self._read("Are you sure you want to exit? (y/n): ")
                if confirm.strip().lower() == "y":
                    raise GameAborted("Player chose to exit")
                continue

            if choice in options:
                return choice

            logger.debug("Rejected input %r", choice)
            print("\nInvalid input!")
            print(menu)

    def contribute(self, committed: Committed, label: str) -> int:
        last = committed.range - 1
        print(f"\n{label}.")
        print(f"I selected a random value in the range 0..{last} (HMAC={committed.digest}).")
        print(f"Add your number modulo {committed.range}.")
        menu = "\n".join(
            [
                f"Valid numbers: 0-{last}",
                f"{EXIT_KEY} - exit",
                f"{HELP_KEY} - help",
            ]
        )
        print(menu)
        options = [str(i) for i in range(committed.range)]
        return int(self.prompt(options, menu))

    def disclose(self, revealed: Revealed, label: str):
        print(f"My number is {revealed.value} (KEY={revealed.key_hex.upper()}).")
        print(f"The fair number generation result is {revealed}.")

    def choose_die(self, available: list[Die]) -> int:
        print("\nChoose your dice:")
        menu = "\n".join(
            [f"{i} - {die}" for i, die in enumerate(available)]
            + [f"{EXIT_KEY} - exit", f"{HELP_KEY} - help"]
        )
        print(menu)
        options = [str(i) for i in range(len(available))]
        return int(self.prompt(options, menu))

    def announce(self, event: str, **details):
        if event == "first_mover":
            if details["computer_first"]:
                print("I make the first move.")
            else:
                print("You make the first move.")
        elif event == "computer_die":
            print(f"I choose the {details['die'].label} dice.")
        elif event == "player_die":
            print(f"You choose the {details['die'].label} dice.")
        elif event == "roll":
            owner = "My" if details["who"] == "Computer" else "Your"
            print(f"{owner} roll result is {details['value']}.")
        elif event == "outcome":
            outcome = details["outcome"]
            player_roll = details["player_roll"]
            computer_roll = details["computer_roll"]
            if outcome == Outcome.PLAYER_WINS:
                print(f"You win ({player_roll} > {computer_roll})!")
            elif outcome == Outcome.COMPUTER_WINS:
                print(f"I win ({computer_roll} > {player_roll})!")
            else:
                print(f"It's a tie ({player_roll} = {computer_roll})!")
        else:
            logger.debug("Unhandled event %s: %s", event, details)
