"""Round state and data structures for the dice game."""

from enum import Enum

from fairdice.dice import Die
from fairdice.fair_draw import Revealed


class RoundPhase(Enum):
    """Round phases, in the only order they can occur."""

    SELECTING_FIRST_MOVER = "SelectingFirstMover"
    SELECTING_DICE = "SelectingDice"
    ROLLING_COMPUTER = "RollingComputer"
    ROLLING_PLAYER = "RollingPlayer"
    COMPARING = "Comparing"
    DONE = "Done"

    def next(self) -> "RoundPhase":
        members = list(RoundPhase)
        index = members.index(self)
        if index == len(members) - 1:
            raise ValueError("Round is already done")
        return members[index + 1]


class Outcome(Enum):
    """Outcome of a finished round."""

    PLAYER_WINS = "PlayerWins"
    COMPUTER_WINS = "ComputerWins"
    TIE = "Tie"


class DrawRecord:
    """A revealed draw and what it decided, kept for the audit trail."""

    def __init__(self, label: str, revealed: Revealed):
        self.label = label
        self.revealed = revealed

    def __str__(self) -> str:
        return f"{self.label}: {self.revealed}"


class RoundState:
    """Transient state of one round: (D, F, Pd, Cd, Pr, Cr)."""

    def __init__(self, dice: list[Die]):
        self.dice = list(dice)
        self.phase = RoundPhase.SELECTING_FIRST_MOVER
        self.computer_first: bool | None = None
        self.player_die: Die | None = None
        self.computer_die: Die | None = None
        self.player_roll: int | None = None
        self.computer_roll: int | None = None
        self.outcome: Outcome | None = None
        self.draws: list[DrawRecord] = []


class RoundResult:
    """Read-only summary of a completed round."""

    def __init__(self, state: RoundState):
        self.computer_first = state.computer_first
        self.player_die = state.player_die
        self.computer_die = state.computer_die
        self.player_roll = state.player_roll
        self.computer_roll = state.computer_roll
        self.outcome = state.outcome
        self.draws = list(state.draws)

    def all_draws_verified(self) -> bool:
        return all(record.revealed.verify() for record in self.draws)

    def __str__(self) -> str:
        return (
            f"{self.outcome.value}: player {self.player_die.label} rolled "
            f"{self.player_roll}, computer {self.computer_die.label} rolled "
            f"{self.computer_roll}"
        )
