"""Automated player implementations for simulated rounds."""

import random

from fairdice.dice import Die
from fairdice.fair_draw import Committed, Revealed


class RandomParty:
    """Player that contributes uniform values and picks dice at random.

    Every draw it takes part in is verified on reveal, so simulations also
    exercise the audit path.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.failed_verifications = 0

    def contribute(self, committed: Committed, label: str) -> int:
        return self.rng.randrange(committed.range)

    def choose_die(self, available: list[Die]) -> int:
        return self.rng.randrange(len(available))

    def disclose(self, revealed: Revealed, label: str):
        if not revealed.verify():
            self.failed_verifications += 1

    def announce(self, event: str, **details):
        pass


class FixedChoiceParty(RandomParty):
    """Player that always takes the same die when it is available."""

    def __init__(self, preferred: Die, rng: random.Random | None = None):
        super().__init__(rng)
        self.preferred = preferred

    def choose_die(self, available: list[Die]) -> int:
        for i, die in enumerate(available):
            if die == self.preferred:
                return i
        return super().choose_die(available)
