"""Turning user supplied seed strings into random sources."""

import hashlib
import random


def seed_from_string(text: str) -> int:
    """
    Map a seed string to a 64-bit integer seed.

    The string is hashed with SHA-256 and the first 8 bytes of the digest
    are read as a little-endian unsigned integer, so equal strings always
    give equal seeds.
    """
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little")


def rng_from_string(text: str) -> random.Random:
    """Create a random source seeded from ``text``."""
    return random.Random(seed_from_string(text))


def random_seed_string() -> str:
    """Draw a fresh seed string from system entropy."""
    return str(random.SystemRandom().getrandbits(64))
