"""
tabular_transposition — Core Test Suite
=======================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_transposition.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math
import pytest
from tabular_transposition import (
    Key, parse_key, Grid, TranspositionCipher,
    encrypt, decrypt, strip_padding, normalize_text,
    TranspositionError, InvalidKeyFormat, InvalidKeyPermutation,
    NonAlphabeticInput, LengthMismatch,
)

MSG = "WEAREDISCOVEREDFLEEATONCE"
KEY = [3, 1, 2]

# ── Key parsing ───────────────────────────────────────────────────────────────
def test_parse_key_contiguous_and_spaced_agree():
    assert parse_key("312") == (3, 1, 2)
    assert parse_key("3 1 2") == (3, 1, 2)
    assert list(parse_key("312")) == [3, 1, 2]

def test_parse_key_multi_digit_ranks():
    raw = "10 2 3 4 5 6 7 8 9 1 11"
    assert parse_key(raw) == (10, 2, 3, 4, 5, 6, 7, 8, 9, 1, 11)

def test_parse_key_ignores_surrounding_and_repeated_whitespace():
    assert parse_key("  2   1\t3 \n") == (2, 1, 3)
    assert parse_key(" 21 ") == (2, 1)

def test_parse_key_single_column():
    assert parse_key("1") == (1,)

@pytest.mark.parametrize("raw", ["1 1 2", "112", "1 2 4", "124", "0 1 2", "012", "4321 5"])
def test_parse_key_rejects_non_permutations(raw):
    with pytest.raises(InvalidKeyPermutation):
        parse_key(raw)

@pytest.mark.parametrize("raw", ["3a2", "3,1,2", "-1 2", "", "   ", "3.1", "٣١٢"])
def test_parse_key_rejects_bad_characters(raw):
    with pytest.raises(InvalidKeyFormat):
        parse_key(raw)

def test_duplicate_rank_is_reported():
    with pytest.raises(InvalidKeyPermutation) as exc:
        parse_key("1 1 2")
    assert exc.value.rank == 1
    assert exc.value.ranks == (1, 1, 2)

def test_contiguous_form_cannot_express_ten_columns():
    # the tenth column would need rank 10; "0" is out of range
    with pytest.raises(InvalidKeyPermutation):
        parse_key("1234567890")

def test_key_errors_are_value_errors():
    assert issubclass(InvalidKeyFormat, TranspositionError)
    assert issubclass(TranspositionError, ValueError)
    with pytest.raises(ValueError):
        parse_key("x")

def test_key_from_integers():
    key = Key([2, 3, 1])
    assert key.columns == 3
    assert key.column_order() == [2, 0, 1]
    assert Key(key) == key

def test_key_from_integers_validated():
    with pytest.raises(InvalidKeyPermutation):
        Key([])
    with pytest.raises(InvalidKeyPermutation):
        Key([2, 2])
    with pytest.raises(InvalidKeyFormat):
        Key([1, "2"])
    with pytest.raises(InvalidKeyFormat):
        Key([True])

def test_key_is_immutable():
    key = Key(KEY)
    with pytest.raises(TypeError):
        key[0] = 1

# ── Grid ──────────────────────────────────────────────────────────────────────
def test_grid_fill_rows_pads_last_row():
    grid = Grid.fill_rows("HELLO", 3, "X")
    assert (grid.rows, grid.columns) == (2, 3)
    assert grid.render() == ["H E L", "L O X"]
    assert grid.flatten() == "HELLOX"

def test_grid_fill_rows_exact_fit_has_no_padding():
    grid = Grid.fill_rows("ABCDEF", 3, "X")
    assert grid.render() == ["A B C", "D E F"]

def test_grid_read_columns_in_rank_order():
    grid = Grid.fill_rows("HELLO", 3, "X")
    assert grid.column(0) == "HL"
    assert grid.read_columns(Key(KEY)) == "EOLXHL"

def test_grid_fill_columns_inverts_read_columns():
    grid = Grid.fill_columns("EOLXHL", Key(KEY))
    assert grid.render() == ["H E L", "L O X"]

def test_grid_fill_columns_length_mismatch():
    with pytest.raises(LengthMismatch):
        Grid.fill_columns("ABCDEFG", Key(KEY))

# ── Encryption ────────────────────────────────────────────────────────────────
def test_encrypt_hello_scenario():
    ciphertext, rows = encrypt("HELLO", KEY)
    assert rows == ["H E L", "L O X"]
    assert ciphertext == "EOLXHL"

def test_encrypt_normalizes_case_and_whitespace():
    assert encrypt("he llo", "3 1 2").text == "EOLXHL"

def test_encrypt_classic_example():
    # rows WEARE DISCO VERED FLEEA TONCE
    ct = encrypt(MSG, [2, 5, 1, 3, 4]).text
    assert ct == "ASREN" + "WDVFT" + "RCEEC" + "EODAE" + "EIELO"

@pytest.mark.parametrize("length", range(1, 13))
@pytest.mark.parametrize("key", [[1], [2, 1], [3, 1, 2], [4, 2, 1, 3], [10, 2, 3, 4, 5, 6, 7, 8, 9, 1]])
def test_ciphertext_length_is_padded_to_multiple_of_key(length, key):
    ct = encrypt(MSG[:length], key).text
    assert len(ct) == len(key) * math.ceil(length / len(key))

def test_encrypt_never_strips_filler():
    assert encrypt("AB", [1, 2, 3]).text == "ABX"

def test_encrypt_is_a_transposition():
    ct = encrypt(MSG, [4, 2, 1, 3]).text
    assert sorted(ct) == sorted(MSG + "XXX")

@pytest.mark.parametrize("text", ["HELLO1", "HELLO!", "", "   ", "ÉCOLE", "straße"])
def test_encrypt_rejects_non_letters(text):
    with pytest.raises(NonAlphabeticInput) as exc:
        encrypt(text, KEY)
    assert exc.value.label == "plaintext"

def test_identity_key_reads_rows_as_columns():
    assert encrypt("ABCDEF", [1, 2]).text == "ACEBDF"

# ── Decryption ────────────────────────────────────────────────────────────────
def test_decrypt_hello_scenario():
    plaintext, rows = decrypt("EOLXHL", KEY)
    assert rows == ["H E L", "L O X"]
    assert plaintext == "HELLO"

def test_decrypt_without_strip_keeps_padding():
    assert decrypt("EOLXHL", KEY, strip=False).text == "HELLOX"

def test_decrypt_length_mismatch_before_grid(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("grid built")
    monkeypatch.setattr(Grid, "fill_columns", boom)
    with pytest.raises(LengthMismatch) as exc:
        decrypt("ABCDEFG", KEY)
    assert (exc.value.length, exc.value.columns) == (7, 3)
    assert "divisible" in str(exc.value)

def test_decrypt_rejects_non_letters():
    with pytest.raises(NonAlphabeticInput) as exc:
        decrypt("EOL-HL", KEY)
    assert exc.value.label == "ciphertext"

@pytest.mark.parametrize("key", ["1", "21", "312", "4213", "10 2 3 4 5 6 7 8 9 1", "52413"])
def test_roundtrip(key):
    ct = encrypt(MSG, key).text
    assert ct != MSG or key == "1"
    assert decrypt(ct, key).text == MSG

def test_roundtrip_loses_genuine_trailing_filler():
    # known property of filler padding
    ct = encrypt("RELAX", KEY).text
    assert decrypt(ct, KEY).text == "RELA"
    assert decrypt(ct, KEY, strip=False).text == "RELAXX"

# ── Padding ───────────────────────────────────────────────────────────────────
def test_strip_padding_trailing_run_only():
    assert strip_padding("XAXBXX") == "XAXB"
    assert strip_padding("HELLO") == "HELLO"
    assert strip_padding("XXX") == ""

def test_strip_padding_custom_filler():
    assert strip_padding("HELLOQQ", "Q") == "HELLO"

# ── Cipher object ─────────────────────────────────────────────────────────────
def test_cipher_object_reusable():
    c = TranspositionCipher("4213")
    assert c.key == (4, 2, 1, 3)
    for msg in ("ATTACK", "ATDAWN", "Z"):
        assert c.decrypt(c.encrypt(msg).text).text == msg

def test_custom_filler():
    c = TranspositionCipher(KEY, filler="Q")
    assert c.encrypt("HELLO").text == "EOLQHL"
    assert c.decrypt("EOLQHL").text == "HELLO"

@pytest.mark.parametrize("filler", ["", "XY", "x", "1", "É"])
def test_invalid_filler(filler):
    with pytest.raises(ValueError):
        TranspositionCipher(KEY, filler=filler)

def test_normalize_text():
    assert normalize_text(" a b\tc\n") == "ABC"


# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
