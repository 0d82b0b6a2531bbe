"""Polynomial string hash over base-36 chunks of a-z and 0-9."""

from __future__ import annotations

import sys
import time

from boggleht.rng import MersenneTwister

MAX_KEY_LENGTH = 30
_CHUNK = 6
_CHUNKS = 5
_MASK64 = (1 << 64) - 1

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(letter: str) -> int:
    """Map a-z (either case) to 0-25 and 0-9 to 26-35; anything else is 0."""
    if "A" <= letter <= "Z":
        letter = chr(ord(letter) + 32)
    if "a" <= letter <= "z":
        return ord(letter) - ord("a")
    if "0" <= letter <= "9":
        return 26 + ord(letter) - ord("0")
    return 0


class MyStringHash:
    """String hash h(k) = sum r[i] * w[i], modulo 2**64.

    The key is cut into 6-character chunks from its end, each read as a
    base-36 number; the last chunk fills w[4], the one before w[3], and so on.
    """

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, k: str) -> int:
        if len(k) > MAX_KEY_LENGTH:
            raise ValueError(
                f"key longer than {MAX_KEY_LENGTH} characters: {len(k)}"
            )
        w = [0] * _CHUNKS
        for slot, end in zip(range(_CHUNKS - 1, -1, -1), range(len(k), 0, -_CHUNK)):
            value = 0
            for ch in k[max(0, end - _CHUNK):end]:
                value = value * 36 + letter_digit_to_number(ch)
            w[slot] = value
        return sum(r * x for r, x in zip(self.r_values, w)) & _MASK64

    def generate_r_values(self) -> None:
        """Replace the r values with ones drawn from a clock-seeded generator."""
        seed = time.time_ns() & 0xFFFFFFFF
        generator = MersenneTwister(seed)
        self.r_values = [generator() for _ in range(_CHUNKS)]


def main(argv: list[str] | None = None) -> int:
    """Print the debug-mode hash of the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={MyStringHash(True)(key)}")
    return 0