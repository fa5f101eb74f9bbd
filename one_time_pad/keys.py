"""
Key Manager
===========
Produces the encryption key: a list of alphabet indices, one per
plaintext position.

Two sources:
  * generate_key     -- uniform random indices from an injected
                        numpy Generator (seeded per process by default)
  * key_from_string  -- indices of the characters of a literal key string,
                        growing the alphabet to fit unknown characters

The decryption key is never stored. It is derived on demand as
`alphabet_size - k`, which the forward rotation wraps back to the
inverse shift (n - 0 == n, and n mod n == 0).
"""

import logging
from typing import Optional

import numpy as np

from .alphabet import Alphabet

logger = logging.getLogger(__name__)


class OneTimePadError(ValueError):
    """Base class for invalid pad parameters."""


class InvalidAlphabetSize(OneTimePadError):
    """A key cannot index into an empty alphabet."""


class InvalidKeySize(OneTimePadError):
    """Key length out of range."""


def generate_key(alphabet_size: int, keysize: int,
                 rng: Optional[np.random.Generator] = None) -> list:
    """
    Draw `keysize` independent indices uniformly from [0, alphabet_size).
    Pass a seeded Generator for reproducible keys.
    """
    if alphabet_size <= 0:
        raise InvalidAlphabetSize(
            f"Alphabet size must be positive, got {alphabet_size}."
        )
    if keysize < 0:
        raise InvalidKeySize(f"Key size must not be negative, got {keysize}.")
    if rng is None:
        rng = np.random.default_rng()
    return rng.integers(0, alphabet_size, size=keysize).tolist()


def key_from_string(alphabet: Alphabet, key_str: str) -> list:
    """
    Indices of each character of `key_str` in `alphabet`.

    Characters missing from the alphabet are collected on a first pass,
    merged into the alphabet, and the scan restarts. The alphabet is
    modified in place; indices of existing characters may shift.
    """
    for attempt in range(2):
        key = []
        missing = set()
        for ch in key_str:
            idx = alphabet.index(ch)
            if idx is None:
                missing.add(ch)
            else:
                key.append(idx)
        if not missing:
            return key
        if attempt:
            break
        logger.info(f"Key string has {len(missing)} chars outside the alphabet")
        alphabet.extend(missing)
    raise RuntimeError("Alphabet extension did not cover the key string.")


def key_to_string(alphabet: Alphabet, key: list) -> str:
    return "".join(alphabet[k] for k in key)


def decrypt_key(alphabet_size: int, key: list) -> list:
    # Plain subtraction; encrypt_char's modulo turns n into 0.
    return [alphabet_size - k for k in key]
