"""Game rules for the non-transitive dice game."""

from parameters import FIRST_MOVE_RANGE
from fairdice.dice import Die
from fairdice.errors import ProtocolViolationError
from fairdice.game_state import Outcome


def computer_moves_first(draw_result: int) -> bool:
    """
    FIRST(r): decide the first mover from a fair draw over {0, 1}.

    FIRST(r) = {
        Computer  if r = 1
        Player    if r = 0
    }
    """
    if not 0 <= draw_result < FIRST_MOVE_RANGE:
        raise ProtocolViolationError(
            f"First-mover draw result {draw_result} outside 0..{FIRST_MOVE_RANGE - 1}"
        )
    return draw_result == 1


def remaining_dice(dice: list[Die], taken: Die) -> list[Die]:
    """Pool left after one die is taken, removed by identity rather than value."""
    remaining = [die for die in dice if die is not taken]
    if len(remaining) != len(dice) - 1:
        raise ProtocolViolationError(f"Die {taken.label} is not in the pool")
    return remaining


def compare_rolls(player_roll: int, computer_roll: int) -> Outcome:
    """
    WIN(Pr, Cr): the higher face wins.

    WIN(Pr, Cr) = {
        Player    if Pr > Cr
        Computer  if Pr < Cr
        Tie       if Pr = Cr
    }
    """
    if player_roll > computer_roll:
        return Outcome.PLAYER_WINS
    if player_roll < computer_roll:
        return Outcome.COMPUTER_WINS
    return Outcome.TIE
