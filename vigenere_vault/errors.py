"""
Errors
======
Every failure the package raises on purpose.

Cipher construction errors subclass ValueError, the same way the
original tier ciphers rejected bad keys. Store errors form their own
branch so callers can tell "bad cipher setup" from "bad record access".
"""


class CipherError(ValueError):
    """Base class for cipher construction errors."""


class EmptyAlphabetError(CipherError):
    """The alphabet has no symbols, so no position is defined."""


class EmptyKeyError(CipherError):
    """No key character is a member of the alphabet (key period would be 0)."""


class StoreError(Exception):
    """Base class for message store errors."""


class MessageNotFoundError(StoreError, LookupError):
    def __init__(self, message_id: str):
        super().__init__(f"A message with id={message_id} not found")
        self.message_id = message_id


class TitleMismatchError(StoreError):
    """The caller's copy of the current title does not match the stored one."""


class KeyMismatchError(StoreError):
    """A record was encoded under a different key/alphabet than the reader's."""
