"""
one_time_pad
============
Keyed character-substitution cipher.

Each character of a message is rotated through a sorted alphabet by the
key element at its position. The alphabet is the 52 ASCII letters plus
caller-supplied extras; the key is random or taken from a literal string.

Not cryptographically secure. The key is reusable and fixed-length,
so this is a "one-time pad" in name only.

Modules:
    alphabet  — sorted, growable character set
    keys      — random and string-derived keys, error types
    pad       — OneTimePad encrypt/decrypt engine

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet import Alphabet, build_alphabet
from .keys     import (
    OneTimePadError,
    InvalidAlphabetSize,
    InvalidKeySize,
    generate_key,
    key_from_string,
    key_to_string,
    decrypt_key,
)
from .pad      import OneTimePad

__all__ = [
    "Alphabet",
    "build_alphabet",
    "OneTimePadError",
    "InvalidAlphabetSize",
    "InvalidKeySize",
    "generate_key",
    "key_from_string",
    "key_to_string",
    "decrypt_key",
    "OneTimePad",
]
