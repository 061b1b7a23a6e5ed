"""Round orchestrator: sequences fair draws through one game round."""

import logging
from typing import Protocol

from parameters import FIRST_MOVE_RANGE
from fairdice.dice import Die, validate_dice
from fairdice.errors import ProtocolViolationError
from fairdice.fair_draw import Committed, FairDrawProtocol, Revealed
from fairdice.game_state import (
    DrawRecord,
    RoundPhase,
    RoundResult,
    RoundState,
)
from fairdice.rules import compare_rolls, computer_moves_first, remaining_dice

logger = logging.getLogger(__name__)


class Party(Protocol):
    """The human side of a round, as seen by the orchestrator."""

    def contribute(self, committed: Committed, label: str) -> int:
        """Return the player's value in [0, committed.range) for this draw."""
        ...

    def choose_die(self, available: list[Die]) -> int:
        """Return the index of the die the player takes from available."""
        ...

    def disclose(self, revealed: Revealed, label: str) -> None:
        """Show the revealed key and value so the player can verify the draw."""
        ...

    def announce(self, event: str, **details) -> None:
        """Narrate a round event (first_mover, computer_die, player_die, roll, outcome)."""
        ...


class RoundOrchestrator:
    """Drives one round through its phases.

    SelectingFirstMover -> SelectingDice -> RollingComputer -> RollingPlayer
    -> Comparing -> Done

    Each call to step() runs exactly one phase. If a phase fails, the round
    state is discarded and any commitment still in flight is never revealed.
    """

    def __init__(
        self,
        dice: list[Die],
        party: Party,
        protocol: FairDrawProtocol | None = None,
    ):
        """
        Args:
            dice: Validated dice pool (at least 3, pairwise distinct)
            party: The player's I/O collaborator
            protocol: Fair draw protocol. Defaults to one backed by the OS CSPRNG.
        """
        validate_dice(dice)
        self.party = party
        self.protocol = protocol if protocol is not None else FairDrawProtocol()
        self.state: RoundState | None = RoundState(dice)
        self._handlers = {
            RoundPhase.SELECTING_FIRST_MOVER: self._select_first_mover,
            RoundPhase.SELECTING_DICE: self._select_dice,
            RoundPhase.ROLLING_COMPUTER: self._roll_computer,
            RoundPhase.ROLLING_PLAYER: self._roll_player,
            RoundPhase.COMPARING: self._compare,
        }

    @property
    def phase(self) -> RoundPhase | None:
        """Current phase, or None once the round has been discarded."""
        return self.state.phase if self.state is not None else None

    def step(self) -> RoundPhase:
        """Run the current phase and advance to the next one."""
        if self.state is None:
            raise ProtocolViolationError("Round state has been discarded")
        phase = self.state.phase
        if phase == RoundPhase.DONE:
            raise ProtocolViolationError("Round is already done")

        logger.debug("Entering phase %s", phase.value)
        try:
            self._handlers[phase]()
        except BaseException:
            logger.debug("Phase %s failed, discarding round", phase.value)
            self.discard()
            raise

        self.state.phase = phase.next()
        return self.state.phase

    def run(self) -> RoundResult:
        """Step through every phase and return the finished round."""
        while self.phase != RoundPhase.DONE:
            self.step()
        result = RoundResult(self.state)
        self.discard()
        return result

    def discard(self):
        """Drop the round state. Nothing partial is kept or exposed."""
        self.state = None

    def _fair_draw(self, range_size: int, label: str) -> int:
        committed = self.protocol.begin_draw(range_size)
        contribution = self.party.contribute(committed, label)
        revealed = self.protocol.accept_contribution(committed, contribution)
        self.state.draws.append(DrawRecord(label, revealed))
        self.party.disclose(revealed, label)
        return revealed.result

    def _select_first_mover(self):
        result = self._fair_draw(FIRST_MOVE_RANGE, "Determine who makes the first move")
        self.state.computer_first = computer_moves_first(result)
        self.party.announce("first_mover", computer_first=self.state.computer_first)

    def _select_dice(self):
        pool = self.state.dice
        if self.state.computer_first:
            computer_die = self._computer_pick(pool)
            player_die = self._player_pick(remaining_dice(pool, computer_die))
        else:
            player_die = self._player_pick(pool)
            computer_die = self._computer_pick(remaining_dice(pool, player_die))

        if player_die == computer_die:
            raise ProtocolViolationError("Both parties hold the same die")
        self.state.player_die = player_die
        self.state.computer_die = computer_die

    def _computer_pick(self, pool: list[Die]) -> Die:
        if len(pool) == 1:
            die = pool[0]
        else:
            index = self._fair_draw(len(pool), "Choose the computer's die")
            die = pool[index]
        self.party.announce("computer_die", die=die)
        return die

    def _player_pick(self, pool: list[Die]) -> Die:
        index = self.party.choose_die(list(pool))
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(pool):
            raise ProtocolViolationError(
                f"Die choice {index!r} outside 0..{len(pool) - 1}"
            )
        die = pool[index]
        self.party.announce("player_die", die=die)
        return die

    def _roll(self, die: Die, who: str) -> int:
        index = self._fair_draw(die.face_count, f"{who} roll with {die.label}")
        value = die.face(index)
        self.party.announce("roll", who=who, die=die, value=value)
        return value

    def _roll_computer(self):
        self.state.computer_roll = self._roll(self.state.computer_die, "Computer")

    def _roll_player(self):
        self.state.player_roll = self._roll(self.state.player_die, "Player")

    def _compare(self):
        self.state.outcome = compare_rolls(self.state.player_roll, self.state.computer_roll)
        self.party.announce(
            "outcome",
            outcome=self.state.outcome,
            player_roll=self.state.player_roll,
            computer_roll=self.state.computer_roll,
        )
