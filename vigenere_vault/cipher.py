"""
Cipher Engine: Alphabet-Relative Vigenère
==========================================
Polyalphabetic substitution over a caller-supplied alphabet.

The alphabet is any ordered string of symbols; its length L is the
modulus. The key is reduced to the positions of its characters that
are themselves alphabet members (the key-position sequence, length K).
Message index i selects key slot i mod K, and i counts every message
character, including the ones that pass through unchanged.

    encode:  c' = alphabet[(pos(c) + key[i mod K]) mod L]
    decode:  c  = alphabet[(pos(c') - key[i mod K]) mod L]

Symbols outside the alphabet are emitted as-is. Nothing is case folded:
membership alone decides what gets substituted.

Not a secure cipher. It obscures stored text and restores it on read.
"""

import logging
from typing import Dict, Tuple

from .errors import EmptyAlphabetError, EmptyKeyError

logger = logging.getLogger(__name__)


def _position_map(alphabet: str) -> Dict[str, int]:
    # First occurrence wins for repeated symbols.
    positions = {}
    for idx, symbol in enumerate(alphabet):
        positions.setdefault(symbol, idx)
    return positions


def derive_key_positions(key: str, alphabet: str) -> Tuple[int, ...]:
    """
    Zero-based alphabet position of every key character that is in the
    alphabet, in key order. Other key characters are dropped entirely.
    """
    positions = _position_map(alphabet)
    return tuple(positions[ch] for ch in key if ch in positions)


class VigenereCipher:
    """
    Vigenère cipher over an arbitrary alphabet.

    Immutable after construction: the position map and the key-position
    sequence are built once, so one instance can be shared freely and
    each character costs a single dict lookup.

    Repeated symbols in the alphabet are the caller's problem. They map
    to their first position and make the substitution non-injective.
    """

    def __init__(self, key: str, alphabet: str):
        if not alphabet:
            raise EmptyAlphabetError("Alphabet must contain at least one symbol.")
        self._key       = key
        self._alphabet  = alphabet
        self._positions = _position_map(alphabet)
        self._key_positions = derive_key_positions(key, alphabet)
        if not self._key_positions:
            raise EmptyKeyError(
                "Key must contain at least one character from the alphabet."
            )
        logger.debug(
            f"VigenereCipher L={len(alphabet)} K={len(self._key_positions)}"
        )

    @property
    def key(self) -> str:
        return self._key

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def key_positions(self) -> Tuple[int, ...]:
        return self._key_positions

    def _transform(self, text: str, direction: int) -> str:
        alphabet  = self._alphabet
        positions = self._positions
        stream    = self._key_positions
        size      = len(alphabet)
        period    = len(stream)
        result = []
        for idx, ch in enumerate(text):
            pos = positions.get(ch)
            if pos is None:
                result.append(ch)
                continue
            shift = (pos + direction * stream[idx % period]) % size
            assert 0 <= shift < size, f"shift {shift} outside alphabet"
            result.append(alphabet[shift])
        return "".join(result)

    def encode(self, plaintext: str) -> str:
        """Encode plaintext. Non-alphabet characters pass through."""
        return self._transform(plaintext, 1)

    def decode(self, ciphertext: str) -> str:
        """Decode ciphertext produced with the same key and alphabet."""
        return self._transform(ciphertext, -1)

    def __repr__(self):
        return (f"VigenereCipher(alphabet_size={len(self._alphabet)}, "
                f"key_period={len(self._key_positions)})")
