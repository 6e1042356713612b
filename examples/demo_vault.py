"""
vigenere_vault — Live Demo
==========================
Run:  python examples/demo_vault.py
      CYPHER_KEY=Secret python examples/demo_vault.py

Encodes a few strings, then stores, reads, updates and deletes a
message, printing what sits in the store at each step.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_vault import (
    CipherSettings, MessagePayload, MessageStore, TitleMismatchError, VigenereCipher,
)

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
header("Cipher — KEY over A-Z")
c = VigenereCipher("KEY", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ok("Key positions", c.key_positions)
ok("HELLO   →", c.encode("HELLO"))
ok("HI, BOB →", c.encode("HI, BOB"))
ok("Decoded", c.decode(c.encode("HI, BOB")))

# ─────────────────────────────────────────────────────────────────────────────
header("Store — settings from environment")
settings = CipherSettings.from_env()
store    = MessageStore(settings.build())
ok("Settings", repr(settings))

rec = store.add(MessagePayload(title="Shopping list",
                               body="Eggs, milk, 2 loaves",
                               attachment_url="https://example.org/list.txt"))
ok("Stored title", rec.title)
ok("Stored body ", rec.body)
ok("Read back   ", store.get(rec.id).body)

try:
    store.update(rec.id, MessagePayload(title="x", body="y"), old_title="wrong")
except TitleMismatchError as e:
    ok("Guarded update", e)

store.update(rec.id, MessagePayload(title="Shopping list", body="Eggs only"),
             old_title="Shopping list")
ok("Updated body", store.get(rec.id).body)
store.delete(rec.id)
ok("Messages left", str(len(store)))
print(LINE + "\n")
