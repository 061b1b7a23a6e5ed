"""Error types for the fair dice game."""

from enum import Enum


class ConfigErrorKind(Enum):
    """Why a dice configuration was rejected."""

    NO_DICE = "NoDice"
    TOO_FEW_DICE = "TooFewDice"
    EMPTY_DIE = "EmptyDie"
    NON_INTEGER_FACE = "NonIntegerFace"
    NON_POSITIVE_FACE = "NonPositiveFace"
    DEGENERATE_DIE = "DegenerateDie"
    DUPLICATE_DICE = "DuplicateDice"


class FairDiceError(Exception):
    """Base class for all game errors."""


class DiceConfigError(FairDiceError):
    """Invalid dice configuration. Fatal before any draw takes place."""

    def __init__(self, kind: ConfigErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class ProtocolViolationError(FairDiceError):
    """A caller broke the draw contract (bad range, out-of-range value, reuse)."""


class EntropyUnavailableError(FairDiceError):
    """The secure random source failed, so fairness cannot be guaranteed."""


class GameAborted(FairDiceError):
    """The player asked to leave the game."""
