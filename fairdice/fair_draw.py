"""Commit-reveal fair draw protocol.

A fair draw produces an integer in [0, range) that neither party controls:

    1) The computer picks a secret value and a fresh secret key, and
       publishes HMAC(key, value) before the player acts.
    2) The player picks their own value in [0, range).
    3) The result is (computer value + player value) mod range, and the
       computer discloses key and value so the player can recompute the HMAC.

As long as the computer's value is uniform, the player's choice only rotates
the distribution, so the result stays uniform.
"""

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass, field
from typing import Protocol

from parameters import HMAC_ALGORITHM, KEY_BYTES, RAW_BYTES, RAW_SPACE
from fairdice.errors import EntropyUnavailableError, ProtocolViolationError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Source of secure randomness injected into the protocol."""

    def token_bytes(self, n: int) -> bytes: ...

    def uint32(self) -> int: ...


class SystemRandomSource:
    """Operating system CSPRNG via the secrets module."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def uint32(self) -> int:
        return int.from_bytes(secrets.token_bytes(RAW_BYTES), "big")


def compute_digest(key: bytes, value: int) -> str:
    """HMAC of the canonical decimal encoding of value, as lowercase hex."""
    digestmod = getattr(hashlib, HMAC_ALGORITHM)
    return hmac.new(key, str(value).encode("utf-8"), digestmod).hexdigest()


def verify_disclosure(digest: str, key: bytes, value: int) -> bool:
    """Check that a disclosed (key, value) pair matches a published digest."""
    return hmac.compare_digest(
        compute_digest(key, value).encode("ascii"), digest.lower().encode("utf-8")
    )


def rejection_limit(range_size: int) -> int:
    """Largest multiple of range_size not exceeding 2**32.

    Raw draws at or above this limit fall in the biased tail and are redrawn.
    """
    return RAW_SPACE - (RAW_SPACE % range_size)


@dataclass
class Committed:
    """A published commitment. Only the digest and range are public.

    The key and value stay private until the protocol reveals them, and a
    commitment can be revealed at most once.
    """

    range: int
    digest: str
    _key: bytes = field(repr=False, compare=False)
    _value: int = field(repr=False, compare=False)
    _revealed: bool = field(default=False, repr=False, compare=False)

    @property
    def revealed(self) -> bool:
        return self._revealed

    def __str__(self) -> str:
        return f"HMAC={self.digest} (range 0..{self.range - 1})"


@dataclass(frozen=True)
class Revealed:
    """A completed draw with its secret disclosed for audit."""

    range: int
    digest: str
    key: bytes
    value: int
    contribution: int
    result: int

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    def verify(self) -> bool:
        return verify_disclosure(self.digest, self.key, self.value)

    def __str__(self) -> str:
        return (
            f"({self.value} + {self.contribution}) mod {self.range} = {self.result}"
        )


def verify(revealed: Revealed) -> bool:
    """Recompute the digest of a revealed draw and compare with the published one."""
    return revealed.verify()


class FairDrawProtocol:
    """Runs commit-reveal draws against an injected random source."""

    def __init__(self, source: RandomSource | None = None):
        """
        Args:
            source: Random source to use. Defaults to the OS CSPRNG.
        """
        self.source = source if source is not None else SystemRandomSource()

    def begin_draw(self, range_size: int) -> Committed:
        """Commit to a secret value in [0, range_size) and publish its digest."""
        if isinstance(range_size, bool) or not isinstance(range_size, int):
            raise ProtocolViolationError(f"Draw range must be an int, got {range_size!r}")
        if range_size <= 0:
            raise ProtocolViolationError(f"Draw range must be positive, got {range_size}")

        try:
            key = self.source.token_bytes(KEY_BYTES)
            value = self._sample(range_size)
        except (OSError, NotImplementedError) as e:
            raise EntropyUnavailableError(f"Secure random source failed: {e}") from e

        if len(key) < KEY_BYTES:
            raise EntropyUnavailableError(
                f"Random source returned {len(key)} key bytes, need {KEY_BYTES}"
            )

        committed = Committed(
            range=range_size,
            digest=compute_digest(key, value),
            _key=key,
            _value=value,
        )
        logger.debug("Committed draw over %d values: %s", range_size, committed.digest)
        return committed

    def accept_contribution(self, committed: Committed, user_value: int) -> Revealed:
        """Combine the player's value with the commitment and disclose the secret."""
        if isinstance(user_value, bool) or not isinstance(user_value, int):
            raise ProtocolViolationError(
                f"Contribution must be an int, got {user_value!r}"
            )
        if not 0 <= user_value < committed.range:
            raise ProtocolViolationError(
                f"Contribution {user_value} outside 0..{committed.range - 1}"
            )
        if committed._revealed:
            raise ProtocolViolationError("Commitment has already been revealed")
        committed._revealed = True

        result = (committed._value + user_value) % committed.range
        revealed = Revealed(
            range=committed.range,
            digest=committed.digest,
            key=committed._key,
            value=committed._value,
            contribution=user_value,
            result=result,
        )
        logger.debug("Revealed draw: %s", revealed)
        return revealed

    def _sample(self, range_size: int) -> int:
        """Uniform value in [0, range_size) by rejection sampling 32-bit draws."""
        limit = rejection_limit(range_size)
        while True:
            raw = self.source.uint32()
            if raw < limit:
                return raw % range_size
            logger.debug("Rejected raw draw %d (limit %d)", raw, limit)
