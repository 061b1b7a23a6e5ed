"""Shared fixtures for the fair dice tests."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from fairdice.dice import Die
from fairdice.fair_draw import FairDrawProtocol


class FixedSource:
    """Random source that replays scripted raw values and numbered keys."""

    def __init__(self, raws: list[int]):
        self.raws = list(raws)
        self.keys_issued = 0

    def token_bytes(self, n: int) -> bytes:
        self.keys_issued += 1
        return bytes([self.keys_issued % 256]) * n

    def uint32(self) -> int:
        if not self.raws:
            raise AssertionError("FixedSource ran out of raw values")
        return self.raws.pop(0)


class ScriptedParty:
    """Party that answers from fixed lists and records what it was shown."""

    def __init__(self, contributions: list[int], die_choices: list[int] = ()):
        self.contributions = list(contributions)
        self.die_choices = list(die_choices)
        self.commitments = []
        self.disclosed = []
        self.events = []
        self.offered = []

    def contribute(self, committed, label):
        self.commitments.append((label, committed))
        return self.contributions.pop(0)

    def choose_die(self, available):
        self.offered.append(list(available))
        return self.die_choices.pop(0)

    def disclose(self, revealed, label):
        self.disclosed.append((label, revealed))

    def announce(self, event, **details):
        self.events.append((event, details))


@pytest.fixture
def classic_dice():
    return [
        Die([2, 2, 4, 4, 9, 9]),
        Die([1, 1, 6, 6, 8, 8]),
        Die([3, 3, 5, 5, 7, 7]),
    ]


@pytest.fixture
def fixed_protocol():
    def make(raws):
        return FairDrawProtocol(FixedSource(raws))

    return make
