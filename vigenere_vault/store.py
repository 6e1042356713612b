"""
Message Store
=============
Keeps message records with their text fields encoded at rest.

Write path:  payload → encode(title, body, attachment_url) → backend
Read path:   backend → fingerprint check → decode → caller

The backend is any MutableMapping keyed by message id; a plain dict by
default. Every record remembers the fingerprint of the key/alphabet
that encoded it, and a store refuses to decode records written under a
different pair instead of returning garbage.

Updates are guarded: the caller must present the current title, the
same proof-of-knowledge check the store has always asked for.
"""

import logging
import time
import uuid
from dataclasses import dataclass, replace
from typing import List, MutableMapping, Optional

from .cipher import VigenereCipher
from .errors import KeyMismatchError, MessageNotFoundError, TitleMismatchError
from .fingerprint import key_fingerprint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessagePayload:
    title: str
    body: str
    attachment_url: str = ""


@dataclass(frozen=True)
class Message:
    id: str
    title: str
    body: str
    attachment_url: str
    created_at: int
    updated_at: Optional[int]
    key_fingerprint: str


class MessageStore:
    """Encode-on-write / decode-on-read message records."""

    def __init__(self, cipher: VigenereCipher,
                 backend: MutableMapping[str, Message] = None):
        self._cipher = cipher
        self._fingerprint = key_fingerprint(cipher.key, cipher.alphabet)
        self._records = {} if backend is None else backend

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    # ── internals ────────────────────────────────────────────────────────────
    def _fetch(self, message_id: str) -> Message:
        try:
            return self._records[message_id]
        except KeyError:
            raise MessageNotFoundError(message_id) from None

    def _decoded(self, record: Message) -> Message:
        if record.key_fingerprint != self._fingerprint:
            raise KeyMismatchError(
                f"Message id={record.id} was encoded with key "
                f"{record.key_fingerprint}, store uses {self._fingerprint}"
            )
        decode = self._cipher.decode
        return replace(
            record,
            title=decode(record.title),
            body=decode(record.body),
            attachment_url=decode(record.attachment_url),
        )

    # ── queries ──────────────────────────────────────────────────────────────
    def get(self, message_id: str) -> Message:
        """Decoded copy of one message."""
        return self._decoded(self._fetch(message_id))

    def list(self) -> List[Message]:
        """Decoded copies of every message, in backend order."""
        return [self._decoded(record) for record in self._records.values()]

    # ── updates ──────────────────────────────────────────────────────────────
    def add(self, payload: MessagePayload) -> Message:
        """
        Store a new message. Returns the record as stored, i.e. with
        title, body and attachment_url already encoded.
        """
        encode = self._cipher.encode
        record = Message(
            id=str(uuid.uuid4()),
            title=encode(payload.title),
            body=encode(payload.body),
            attachment_url=encode(payload.attachment_url),
            created_at=time.time_ns(),
            updated_at=None,
            key_fingerprint=self._fingerprint,
        )
        self._records[record.id] = record
        logger.info(f"Message added id={record.id}")
        return record

    def update(self, message_id: str, payload: MessagePayload,
               old_title: str) -> Message:
        """
        Replace the text fields of a message.

        old_title must match the decoded current title, otherwise
        TitleMismatchError is raised and nothing changes.
        """
        current = self._decoded(self._fetch(message_id))
        if current.title != old_title:
            logger.debug(f"Title check failed for id={message_id}")
            raise TitleMismatchError("Wrong cipher data: title does not match.")

        encode = self._cipher.encode
        record = replace(
            self._records[message_id],
            title=encode(payload.title),
            body=encode(payload.body),
            attachment_url=encode(payload.attachment_url),
            updated_at=time.time_ns(),
        )
        self._records[message_id] = record
        logger.info(f"Message updated id={message_id}")
        return record

    def delete(self, message_id: str) -> Message:
        """Remove a message and return the stored (encoded) record."""
        record = self._fetch(message_id)
        del self._records[message_id]
        logger.info(f"Message deleted id={message_id}")
        return record

    def __len__(self):
        return len(self._records)

    def __contains__(self, message_id):
        return message_id in self._records
