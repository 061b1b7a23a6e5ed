"""Dice model and command-line dice parsing."""

import re

from parameters import MIN_DICE
from fairdice.errors import ConfigErrorKind, DiceConfigError

_DIE_PATTERN = re.compile(r"^\d+(,\d+)*$")


class Die:
    """An immutable die: an ordered sequence of positive integer faces."""

    __slots__ = ("_faces",)

    def __init__(self, faces):
        faces = tuple(faces)
        if not faces:
            raise DiceConfigError(
                ConfigErrorKind.EMPTY_DIE, "A die must have at least one face"
            )
        for face in faces:
            if isinstance(face, bool) or not isinstance(face, int):
                raise DiceConfigError(
                    ConfigErrorKind.NON_INTEGER_FACE,
                    f"Die face {face!r} is not an integer",
                )
            if face <= 0:
                raise DiceConfigError(
                    ConfigErrorKind.NON_POSITIVE_FACE,
                    f"Die face {face} is not a positive integer",
                )
        if len(set(faces)) == 1:
            raise DiceConfigError(
                ConfigErrorKind.DEGENERATE_DIE,
                f"Die [{','.join(map(str, faces))}] has all identical faces",
            )
        object.__setattr__(self, "_faces", faces)

    def __setattr__(self, name, value):
        raise AttributeError("Die is immutable")

    @property
    def faces(self) -> tuple[int, ...]:
        return self._faces

    @property
    def face_count(self) -> int:
        return len(self._faces)

    def face(self, index: int) -> int:
        """Face value at index, where index comes from a completed fair draw."""
        if not 0 <= index < len(self._faces):
            raise IndexError(f"Face index {index} outside 0..{len(self._faces) - 1}")
        return self._faces[index]

    @property
    def label(self) -> str:
        return f"[{self}]"

    def __len__(self) -> int:
        return len(self._faces)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Die):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self) -> int:
        return hash(self._faces)

    def __str__(self) -> str:
        return ",".join(map(str, self._faces))

    def __repr__(self) -> str:
        return f"Die({list(self._faces)})"


def validate_dice(dice: list[Die]) -> None:
    """Fail fast unless there are enough dice and no two are equal."""
    if not dice:
        raise DiceConfigError(ConfigErrorKind.NO_DICE, "No dice provided")
    if len(dice) < MIN_DICE:
        raise DiceConfigError(
            ConfigErrorKind.TOO_FEW_DICE,
            f"At least {MIN_DICE} dice required, got {len(dice)}",
        )
    if len(set(dice)) != len(dice):
        raise DiceConfigError(
            ConfigErrorKind.DUPLICATE_DICE, "Duplicate dice configurations found"
        )


def parse_die(text: str, position: int) -> Die:
    """Parse one comma separated argument such as "2,2,4,4,9,9".

    Args:
        text: The raw argument
        position: 1-based position of the argument, used in error messages

    Returns:
        The parsed die
    """
    text = text.strip()
    if not _DIE_PATTERN.match(text):
        raise DiceConfigError(
            ConfigErrorKind.NON_INTEGER_FACE,
            f"Non-integer value in dice configuration {position}: {text!r}",
        )
    faces = [int(token) for token in text.split(",")]
    if any(face == 0 for face in faces):
        raise DiceConfigError(
            ConfigErrorKind.NON_POSITIVE_FACE,
            f"Dice configuration {position} contains a zero face",
        )
    if len(set(faces)) == 1:
        raise DiceConfigError(
            ConfigErrorKind.DEGENERATE_DIE,
            f"Die {position} has all identical faces",
        )
    return Die(faces)


def parse_dice(args: list[str]) -> list[Die]:
    """Parse command-line arguments into a validated list of dice."""
    if not args:
        raise DiceConfigError(ConfigErrorKind.NO_DICE, "No dice provided")
    if len(args) < MIN_DICE:
        raise DiceConfigError(
            ConfigErrorKind.TOO_FEW_DICE,
            f"At least {MIN_DICE} dice required, got {len(args)}",
        )

    dice = [parse_die(arg, i + 1) for i, arg in enumerate(args)]
    validate_dice(dice)
    return dice
