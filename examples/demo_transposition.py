"""
tabular_transposition — Live Demo
=================================
Run:  python examples/demo_transposition.py

Encrypts and decrypts a few messages, printing the working grid for
each step and showing how bad keys and bad lengths are reported.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tabular_transposition import (
    encrypt, decrypt, parse_key,
    InvalidKeyFormat, InvalidKeyPermutation, LengthMismatch,
)

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def table(rows):
    for row in rows:
        print(f"       {row}")

# ─────────────────────────────────────────────────────────────────────────────
header("Encrypt HELLO with key 3 1 2")
key = parse_key("3 1 2")
ct, rows = encrypt("HELLO", key)
table(rows)
ok("Ciphertext", ct)

header("Decrypt EOLXHL with key 312")
pt, rows = decrypt(ct, parse_key("312"))
table(rows)
ok("Padded",    decrypt(ct, key, strip=False).text)
ok("Decrypted", pt)

header("Multi-digit key: 10 columns")
key = parse_key("10 2 3 4 5 6 7 8 9 1")
ct, rows = encrypt("We are discovered flee at once", key)
table(rows)
ok("Ciphertext", ct)
ok("Decrypted",  decrypt(ct, key).text)

header("Known limitation: genuine trailing X is stripped")
ct = encrypt("RELAX", "312").text
ok("RELAX encrypts to", ct)
ok("and decrypts to",   decrypt(ct, "312").text)

header("Rejected input")
for raw in ("3a2", "1 1 2", "124"):
    try:
        parse_key(raw)
    except (InvalidKeyFormat, InvalidKeyPermutation) as e:
        ok(f"{raw!r:>8} {type(e).__name__}", e)
try:
    decrypt("ABCDEFG", "312")
except LengthMismatch as e:
    ok("LengthMismatch", e)

print(f"\n{LINE}\n")
