"""
vigenere_vault
==============
Reversible text obfuscation for stored records.

An alphabet-relative Vigenère cipher, a settings helper that builds it
from explicit values or the environment, and an in-memory message store
that keeps text fields encoded at rest.

    cipher  = VigenereCipher("KEY", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    cipher.encode("HELLO")   # 'RIJVS'

Not cryptographically secure. It hides text from casual reading and
nothing more.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .cipher       import VigenereCipher, derive_key_positions
from .errors       import (
    CipherError,
    EmptyAlphabetError,
    EmptyKeyError,
    StoreError,
    MessageNotFoundError,
    TitleMismatchError,
    KeyMismatchError,
)
from .fingerprint  import key_fingerprint
from .settings     import CipherSettings
from .store        import Message, MessagePayload, MessageStore

__all__ = [
    "VigenereCipher",
    "derive_key_positions",
    "CipherError",
    "EmptyAlphabetError",
    "EmptyKeyError",
    "StoreError",
    "MessageNotFoundError",
    "TitleMismatchError",
    "KeyMismatchError",
    "key_fingerprint",
    "CipherSettings",
    "Message",
    "MessagePayload",
    "MessageStore",
]
