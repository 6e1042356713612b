"""
Cipher Settings
===============
Key and alphabet as one explicit value.

Nothing here is cached at module level. Callers read settings once
(from arguments or from the environment) and pass the resulting cipher
to whatever needs it.

Environment:
    CYPHER_KEY            secret key string
    ENCODING_CHARACTERS   alphabet string
"""

import logging
import os
import string
from dataclasses import dataclass
from typing import Mapping, Optional

from .cipher import VigenereCipher
from .fingerprint import key_fingerprint

logger = logging.getLogger(__name__)

KEY_ENV      = "CYPHER_KEY"
ALPHABET_ENV = "ENCODING_CHARACTERS"

DEFAULT_KEY      = "defaultKey"
DEFAULT_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True, repr=False)
class CipherSettings:
    key: str
    alphabet: str = DEFAULT_ALPHABET

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CipherSettings":
        """
        Read CYPHER_KEY / ENCODING_CHARACTERS. Empty or missing values
        fall back to the defaults; a default key is logged as a warning
        because every deployment using it shares the same secret.
        """
        env = os.environ if environ is None else environ
        key = env.get(KEY_ENV) or None
        alphabet = env.get(ALPHABET_ENV) or DEFAULT_ALPHABET
        if key is None:
            logger.warning(f"{KEY_ENV} not set, using the built-in default key")
            key = DEFAULT_KEY
        return cls(key=key, alphabet=alphabet)

    @property
    def fingerprint(self) -> str:
        return key_fingerprint(self.key, self.alphabet)

    def build(self) -> VigenereCipher:
        return VigenereCipher(self.key, self.alphabet)

    def __repr__(self):
        # Never echo the key.
        return (f"CipherSettings(fingerprint={self.fingerprint}, "
                f"alphabet_size={len(self.alphabet)})")
