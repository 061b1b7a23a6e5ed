"""Tests for the dice model and argument parsing."""

import pytest

from fairdice.dice import Die, parse_dice, validate_dice
from fairdice.errors import ConfigErrorKind, DiceConfigError


def test_die_exposes_faces():
    die = Die([1, 4, 4])
    assert die.face_count == 3
    assert len(die) == 3
    assert die.face(0) == 1
    assert die.face(2) == 4
    assert str(die) == "1,4,4"
    assert die.label == "[1,4,4]"


def test_die_face_index_out_of_range():
    with pytest.raises(IndexError):
        Die([1, 2]).face(2)


def test_die_equality_is_by_face_order():
    assert Die([1, 2, 3]) == Die([1, 2, 3])
    assert Die([1, 2, 3]) != Die([3, 2, 1])
    assert len({Die([1, 2]), Die([1, 2]), Die([2, 1])}) == 2


def test_die_is_immutable():
    die = Die([1, 2])
    with pytest.raises(AttributeError):
        die.faces = (3, 4)


@pytest.mark.parametrize(
    "faces, kind",
    [
        ([], ConfigErrorKind.EMPTY_DIE),
        ([5, 5, 5], ConfigErrorKind.DEGENERATE_DIE),
        ([7], ConfigErrorKind.DEGENERATE_DIE),
        ([0, 1], ConfigErrorKind.NON_POSITIVE_FACE),
        ([1, -2], ConfigErrorKind.NON_POSITIVE_FACE),
        ([1, 2.5], ConfigErrorKind.NON_INTEGER_FACE),
        ([1, True], ConfigErrorKind.NON_INTEGER_FACE),
    ],
)
def test_invalid_die_construction(faces, kind):
    with pytest.raises(DiceConfigError) as exc_info:
        Die(faces)
    assert exc_info.value.kind == kind


def test_parse_dice():
    dice = parse_dice(["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"])
    assert [d.faces for d in dice] == [
        (2, 2, 4, 4, 9, 9),
        (1, 1, 6, 6, 8, 8),
        (3, 3, 5, 5, 7, 7),
    ]


def test_parse_dice_allows_different_face_counts():
    dice = parse_dice(["1,2", "3,4,5", "6,7,8,9"])
    assert [d.face_count for d in dice] == [2, 3, 4]


@pytest.mark.parametrize(
    "args, kind",
    [
        ([], ConfigErrorKind.NO_DICE),
        (["1,2", "3,4"], ConfigErrorKind.TOO_FEW_DICE),
        (["1,2", "3,x", "5,6"], ConfigErrorKind.NON_INTEGER_FACE),
        (["1,2", "3,-4", "5,6"], ConfigErrorKind.NON_INTEGER_FACE),
        (["1,2", "3.5,4", "5,6"], ConfigErrorKind.NON_INTEGER_FACE),
        (["1,2", "3,,4", "5,6"], ConfigErrorKind.NON_INTEGER_FACE),
        (["1,2", "0,4", "5,6"], ConfigErrorKind.NON_POSITIVE_FACE),
        (["1,2", "5,5,5", "5,6"], ConfigErrorKind.DEGENERATE_DIE),
        (["1,2", "3,4", "1,2"], ConfigErrorKind.DUPLICATE_DICE),
    ],
)
def test_parse_dice_errors(args, kind):
    with pytest.raises(DiceConfigError) as exc_info:
        parse_dice(args)
    assert exc_info.value.kind == kind


def test_validate_dice_rejects_too_few():
    with pytest.raises(DiceConfigError) as exc_info:
        validate_dice([Die([1, 2]), Die([3, 4])])
    assert exc_info.value.kind == ConfigErrorKind.TOO_FEW_DICE


def test_validate_dice_rejects_duplicates():
    with pytest.raises(DiceConfigError) as exc_info:
        validate_dice([Die([1, 2]), Die([3, 4]), Die([1, 2])])
    assert exc_info.value.kind == ConfigErrorKind.DUPLICATE_DICE
