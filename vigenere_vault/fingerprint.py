"""
Key Fingerprint
===============
Short SHA-256 digest naming a (key, alphabet) pair.

A mismatched key or alphabet does not make decode fail, it just yields
garbage. Records carry the fingerprint of the pair that encoded them so
the store can refuse to decode under the wrong pair.

Input to the hash: len(key) || key || len(alphabet) || alphabet, with
4-byte big-endian lengths over the UTF-8 bytes, so ("AB", "C") and
("A", "BC") never collide.

Dependencies: cryptography >= 41.0
"""

import struct
from cryptography.hazmat.primitives import hashes

FINGERPRINT_HEX = 16   # 64 bits is plenty to tell configurations apart


def key_fingerprint(key: str, alphabet: str) -> str:
    digest = hashes.Hash(hashes.SHA256())
    for part in (key, alphabet):
        raw = part.encode("utf-8")
        digest.update(struct.pack(">I", len(raw)))
        digest.update(raw)
    return digest.finalize().hex()[:FINGERPRINT_HEX]
