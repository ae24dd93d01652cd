"""Random disambiguators for attachment file names."""

import random

# Lowercase letters and digits without the easily confused l, o, 0 and 1
DISAMBIGUATOR_ALPHABET = "abcdefghijkmnpqrstuvwxyz23456789"
DISAMBIGUATOR_LENGTH = 5


class NameGenerator:
    """Callable producing short random suffixes such as ``x9z2q``.

    Pass a seeded ``random.Random`` to get a reproducible sequence.
    """

    def __init__(self, rng: random.Random | None = None, length: int = DISAMBIGUATOR_LENGTH):
        self._rng = rng or random.Random()
        self.length = length

    def __call__(self) -> str:
        return "".join(self._rng.choice(DISAMBIGUATOR_ALPHABET) for _ in range(self.length))
