"""
vigenere_vault — Cipher Engine Tests
=====================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_vault.cipher import VigenereCipher, derive_key_positions
from vigenere_vault.errors import CipherError, EmptyAlphabetError, EmptyKeyError

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
WIDE  = UPPER + "abcdefghijklmnopqrstuvwxyz0123456789"

MESSAGES = [
    "",
    "HELLO",
    "HI, BOB",
    "The quick brown fox jumps over the lazy dog.",
    "tabs\tand\nnewlines",
    "ünïcödé → stays put ✓",
    "A" * 257,
]

# ── key-position sequence ────────────────────────────────────────────────────
def test_key_positions_for_known_key():
    assert VigenereCipher("KEY", UPPER).key_positions == (10, 4, 24)

def test_key_positions_skip_non_members():
    assert derive_key_positions("A-B", "ABC") == derive_key_positions("AB", "ABC")
    assert derive_key_positions("A-B", "ABC") == (0, 1)

def test_key_positions_use_first_occurrence_of_repeated_symbol():
    assert derive_key_positions("BA", "ABA") == (1, 0)

def test_key_longer_than_alphabet_cycles_by_key_length():
    c = VigenereCipher("BBBAB", "AB")
    assert len(c.key_positions) == 5
    assert c.encode("AAAAAA") == "BBBABB"

# ── encode / decode vectors ──────────────────────────────────────────────────
def test_hello_key_vector():
    c = VigenereCipher("KEY", UPPER)
    assert c.encode("HELLO") == "RIJVS"
    assert c.decode("RIJVS") == "HELLO"

def test_punctuation_consumes_key_slots():
    # ',' and ' ' take slots 2 and 0, so B/O/B use slots 1, 2, 0.
    c = VigenereCipher("KEY", UPPER)
    assert c.encode("HI, BOB") == "RM, FML"
    assert c.decode("RM, FML") == "HI, BOB"

def test_key_non_members_do_not_change_ciphertext():
    assert VigenereCipher("K-E Y", UPPER).encode("HELLO") == "RIJVS"

def test_wraparound_at_alphabet_end():
    c = VigenereCipher("B", "ABC")
    assert c.encode("C") == "A"
    assert c.decode("A") == "C"

def test_digit_alphabet():
    c = VigenereCipher("3", "0123456789")
    assert c.encode("2024-10-18") == "5357-43-41"

def test_lowercase_not_folded_into_uppercase_alphabet():
    c = VigenereCipher("KEY", UPPER)
    assert c.encode("hello") == "hello"
    assert c.encode("Hello") == "Rello"

def test_single_symbol_alphabet_is_noop():
    c = VigenereCipher("A", "A")
    assert c.encode("AAB!") == "AAB!"
    assert c.decode("AAB!") == "AAB!"

# ── properties ───────────────────────────────────────────────────────────────
@pytest.mark.parametrize("message", MESSAGES)
@pytest.mark.parametrize("key", ["KEY", "k3y-Phrase", "zzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzz"])
def test_inverse_law(message, key):
    c = VigenereCipher(key, WIDE)
    assert c.decode(c.encode(message)) == message
    assert c.encode(c.decode(message)) == message

@pytest.mark.parametrize("message", MESSAGES)
def test_pass_through_characters_keep_position(message):
    c  = VigenereCipher("KEY", UPPER)
    ct = c.encode(message)
    assert len(ct) == len(message)
    for plain, enc in zip(message, ct):
        if plain not in UPPER:
            assert enc == plain
        else:
            assert enc in UPPER

def test_deterministic():
    a = VigenereCipher("KEY", WIDE)
    b = VigenereCipher("KEY", WIDE)
    msg = "Same input, same output."
    assert a.encode(msg) == a.encode(msg) == b.encode(msg)

def test_wrong_key_does_not_restore_plaintext():
    ct = VigenereCipher("KEY", UPPER).encode("HELLO")
    assert VigenereCipher("LOCK", UPPER).decode(ct) != "HELLO"

# ── construction errors ──────────────────────────────────────────────────────
def test_empty_alphabet_rejected():
    with pytest.raises(EmptyAlphabetError):
        VigenereCipher("KEY", "")

@pytest.mark.parametrize("key", ["", "123", "key"])
def test_key_without_alphabet_members_rejected(key):
    with pytest.raises(EmptyKeyError):
        VigenereCipher(key, UPPER)

def test_cipher_errors_are_value_errors():
    with pytest.raises(ValueError):
        VigenereCipher("KEY", "")
    assert issubclass(EmptyKeyError, CipherError)

def test_repr_hides_key():
    assert "KEY" not in repr(VigenereCipher("KEY", UPPER))
