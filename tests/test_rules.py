"""Tests for the round rules and phase ordering."""

import pytest

from fairdice.dice import Die
from fairdice.errors import ProtocolViolationError
from fairdice.game_state import Outcome, RoundPhase
from fairdice.rules import compare_rolls, computer_moves_first, remaining_dice


def test_first_mover_mapping():
    assert computer_moves_first(1) is True
    assert computer_moves_first(0) is False
    with pytest.raises(ProtocolViolationError):
        computer_moves_first(2)


def test_compare_rolls():
    assert compare_rolls(9, 7) == Outcome.PLAYER_WINS
    assert compare_rolls(3, 8) == Outcome.COMPUTER_WINS
    assert compare_rolls(5, 5) == Outcome.TIE


def test_remaining_dice_removes_by_identity():
    a, b, c = Die([1, 2]), Die([3, 4]), Die([5, 6])
    assert remaining_dice([a, b, c], b) == [a, c]
    with pytest.raises(ProtocolViolationError):
        # Equal by value but not the same instance
        remaining_dice([a, b, c], Die([3, 4]))


def test_phases_only_move_forward():
    phases = [RoundPhase.SELECTING_FIRST_MOVER]
    while phases[-1] != RoundPhase.DONE:
        phases.append(phases[-1].next())
    assert phases == list(RoundPhase)
    with pytest.raises(ValueError):
        RoundPhase.DONE.next()
