"""
one_time_pad — Live Demo
========================
Run:  python examples/demo_one_time_pad.py

Walks through building a pad, encrypting and decrypting a message,
re-keying from a literal string, and the truncating key behaviour.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from one_time_pad import OneTimePad

LINE = "═" * 70
MSG  = "WHAT UP"


def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value!r}' if value != '' else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  one_time_pad — Keyed Substitution Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    # ── Random key ───────────────────────────────────────────────────────────
    header(1, "RANDOM KEY")
    pad = OneTimePad(10, "Hello There", rng=np.random.default_rng(2019))
    ct  = pad.encrypt_string(MSG)
    pt  = pad.decrypt_string(ct)
    ok("Alphabet",  str(pad.alphabet))
    ok("Key",       pad.get_key_str())
    ok("Encrypted", ct)
    ok("Decrypted", pt)

    # ── Literal key ──────────────────────────────────────────────────────────
    header(2, "LITERAL KEY")
    pad.set_encrypt_key("QU Gmijxad")
    ok("Key indices", pad.encrypt_key)
    ok("Encrypted",   pad.encrypt_string(MSG))
    ok("Decrypted",   pad.decrypt_string(pad.encrypt_string(MSG)))

    # ── Alphabet growth ──────────────────────────────────────────────────────
    header(3, "ALPHABET GROWTH ON RE-KEY")
    before = len(pad.alphabet)
    pad.set_encrypt_key("k3y-w1th-d1g1ts!")
    ok("Alphabet size", f"{before} -> {len(pad.alphabet)}")
    ok("Key string",    pad.get_key_str())

    # ── Truncation ───────────────────────────────────────────────────────────
    header(4, "TRUNCATING ZIP")
    pad.set_encrypt_key("abc")
    ok("Input",  "Hello")
    ok("Output", pad.encrypt_string("Hello"))
    ok("Characters beyond the key length are dropped")

    print(f"\n{LINE}\n")
