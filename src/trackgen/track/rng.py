"""
Seeded random source - Deterministic PRNG injected into generation.

Provides:
- SeededRandom with a next_float() -> [0, 1) contract
- Seed normalisation for integer and string seeds
- random_seed() for picking a fresh seed from OS entropy
"""

import hashlib
import logging
import numpy as np

logger = logging.getLogger(__name__)

_SEED_MODULUS = 2 ** 64


def normalize_seed(seed: int | str | None) -> int | None:
    """Convert a user seed into a non-negative integer for numpy.

    Strings are hashed so that the same text always gives the same stream;
    lone surrogates from undecodable argv bytes are hashed as well.
    Negative integers wrap modulo 2**64.
    """
    if seed is None:
        return None
    if isinstance(seed, str):
        digest = hashlib.sha256(seed.encode("utf-8", "surrogatepass")).digest()
        return int.from_bytes(digest[:8], "little")
    return int(seed) % _SEED_MODULUS


class SeededRandom:
    """Deterministic uniform random source.

    One instance belongs to one generation call. Two instances built from
    the same seed return identical draw sequences.

    Usage:
        prng = SeededRandom(12345)
        value = prng.next_float()
    """

    def __init__(self, seed: int | str | None = None):
        """Initialize the generator.

        Args:
            seed: Integer or string seed. None draws a seed from OS entropy.
        """
        self.seed = seed
        self._rng = np.random.default_rng(normalize_seed(seed))

    def next_float(self) -> float:
        """Return the next uniform value in [0, 1)."""
        return float(self._rng.random())

    def uniform(self, low: float, high: float) -> float:
        """Return the next uniform value in [low, high)."""
        return self.next_float() * (high - low) + low


def random_seed() -> int:
    """Pick a new non-negative 31-bit seed from an unseeded generator."""
    rng = np.random.default_rng()
    seed = abs(int(rng.integers(-2 ** 31, 2 ** 31, dtype=np.int64)))
    logger.debug("Picked random seed %d", seed)
    return seed
