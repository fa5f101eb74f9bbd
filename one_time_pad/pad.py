"""
Transform Engine: OneTimePad
============================
Keyed rotation cipher over a sorted alphabet.

Each input character is paired with the key element at the same
position and rotated forward that many places in the alphabet:

    c' = alphabet[(index(c) + k) mod n]

Decryption runs the same rotation with the derived key `n - k`.

Characters outside the alphabet pass through unchanged. Pairing is a
truncating zip: input beyond the key length is dropped from the output,
and key elements beyond the input length are unused.

Despite the name this is a reusable fixed-length key, not a true
one-time pad, and is not cryptographically secure.
"""

import logging
from typing import Optional

import numpy as np

from .alphabet import Alphabet, build_alphabet
from .keys import (
    InvalidKeySize,
    decrypt_key,
    generate_key,
    key_from_string,
    key_to_string,
)

logger = logging.getLogger(__name__)


class OneTimePad:
    """
    Alphabet + encryption key, with the encrypt/decrypt transforms.

    The alphabet is built once at construction from the ASCII letters and
    `extra_chars`. The key starts random and is replaced wholesale by
    set_encrypt_key(), which may grow the alphabet.
    """

    DEFAULT_EXTRA_CHARS = ""

    def __init__(self, keysize: int, extra_chars: str = DEFAULT_EXTRA_CHARS,
                 rng: Optional[np.random.Generator] = None):
        """
        keysize     : number of key elements, i.e. max characters per message
        extra_chars : characters to add to the 52 ASCII letters
        rng         : numpy Generator for key generation (fresh if omitted)
        """
        if isinstance(keysize, bool) or not isinstance(keysize, (int, np.integer)) or keysize <= 0:
            raise InvalidKeySize(f"keysize must be a positive integer, got {keysize!r}.")
        self._alphabet = build_alphabet(extra_chars)
        self._rng = rng if rng is not None else np.random.default_rng()
        self._encrypt_key = generate_key(len(self._alphabet), keysize, self._rng)
        logger.info(f"OneTimePad keysize={keysize} alphabet={len(self._alphabet)}")

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def encrypt_key(self) -> list:
        return list(self._encrypt_key)

    @property
    def keysize(self) -> int:
        return len(self._encrypt_key)

    def set_encrypt_key(self, key_str: str) -> None:
        """
        Replace the key with the alphabet indices of `key_str`.
        Unknown characters are added to the alphabet first, which changes
        the meaning of every index for later calls.
        """
        self._encrypt_key = key_from_string(self._alphabet, key_str)
        logger.info(f"Re-keyed: keysize={len(self._encrypt_key)} alphabet={len(self._alphabet)}")

    def decrypt_key(self) -> list:
        return decrypt_key(len(self._alphabet), self._encrypt_key)

    def encrypt_char(self, char: str, key: int) -> str:
        idx = self._alphabet.index(char)
        if idx is None:
            return char
        return self._alphabet[(idx + key) % len(self._alphabet)]

    def encrypt_string(self, text: str) -> str:
        """Rotate each character forward by its key element."""
        return self._transform(text, self._encrypt_key)

    def decrypt_string(self, text: str) -> str:
        """Inverse of encrypt_string() under the current alphabet."""
        return self._transform(text, self.decrypt_key())

    def get_key_str(self) -> str:
        """The key rendered as the alphabet characters it indexes."""
        return key_to_string(self._alphabet, self._encrypt_key)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _transform(self, text: str, key: list) -> str:
        out = "".join(self.encrypt_char(c, k) for c, k in zip(text, key))
        logger.debug(f"Transform: in={len(text)} out={len(out)}")
        return out

    def __repr__(self):
        return f"OneTimePad(keysize={self.keysize}, alphabet={len(self._alphabet)})"
