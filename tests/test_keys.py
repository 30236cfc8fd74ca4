import random

import pytest

from periodcrack.classical.common import ALPHABET, is_permutation, parse_key_alphabets
from periodcrack.classical.polyalphabetic.keys import (
    decrypt,
    decrypt_slices,
    encrypt,
    random_swap,
    randomize,
    validate_key,
)
from periodcrack.core.errors import InvalidCiphertextCharacter, InvalidInputCharacter, InvalidKey


def test_randomize_always_gives_a_permutation():
    rng = random.Random(7)
    seen = set()
    for _ in range(200):
        col = randomize(rng)
        assert is_permutation(col)
        seen.add(col)
    assert len(seen) > 190


def test_random_swap_keeps_permutation_and_moves_two_letters():
    rng = random.Random(11)
    col = ALPHABET
    for _ in range(500):
        new = random_swap(col, rng)
        assert is_permutation(new)
        assert sum(a != b for a, b in zip(col, new)) == 2
        col = new


def test_random_swap_is_repeatable_for_a_seed():
    a = random_swap(ALPHABET, random.Random(3))
    b = random_swap(ALPHABET, random.Random(3))
    assert a == b


def test_decrypt_uses_rank_within_column():
    key = ["BCDEFGHIJKLMNOPQRSTUVWXYZA"]
    # B sits at rank 0 -> A, A at rank 25 -> Z
    assert decrypt("BA", key) == "AZ"


def test_decrypt_cycles_through_columns():
    key = [ALPHABET, "ZYXWVUTSRQPONMLKJIHGFEDCBA"]
    assert decrypt("AAAA", key) == "AZAZ"


def test_round_trip(plaintext, key):
    ct = encrypt(plaintext, key)
    assert len(ct) == len(plaintext)
    assert ct != plaintext
    assert decrypt(ct, key) == plaintext


def test_reencrypt_recovers_ciphertext(ciphertext):
    rng = random.Random(5)
    for _ in range(20):
        key = [randomize(rng) for _ in range(rng.randint(1, 6))]
        assert encrypt(decrypt(ciphertext, key), key) == ciphertext


def test_decrypt_slices_matches_decrypt(ciphertext, key):
    slices = [ciphertext[i::3] for i in range(3)]
    assert decrypt_slices(slices, key, len(ciphertext)) == decrypt(ciphertext, key)


def test_decrypt_reports_letters_missing_from_column():
    broken = "AACDEFGHIJKLMNOPQRSTUVWXYZ"
    with pytest.raises(InvalidCiphertextCharacter) as err:
        decrypt("QBQQ", [ALPHABET, broken])
    assert err.value.char == "B"
    assert err.value.position == 1
    assert err.value.column == 1


def test_decrypt_rejects_non_letters():
    with pytest.raises(InvalidCiphertextCharacter):
        decrypt("AB C", [ALPHABET])


def test_encrypt_rejects_non_letters():
    with pytest.raises(InvalidInputCharacter):
        encrypt("AB1", [ALPHABET])


def test_validate_key():
    validate_key([ALPHABET])
    with pytest.raises(InvalidKey):
        validate_key([])
    with pytest.raises(InvalidKey):
        validate_key([ALPHABET[:-1]])


def test_parse_key_alphabets_accepts_printed_forms(key):
    assert parse_key_alphabets(" | ".join(key)) == key
    assert parse_key_alphabets("\n".join(f"    [{c}]" for c in key)) == key
    assert parse_key_alphabets(key[0].lower()) == [key[0]]


@pytest.mark.parametrize(
    "text, match",
    [
        ("", "Empty"),
        ("ABC", "expected 26"),
        ("AACDEFGHIJKLMNOPQRSTUVWXYZ", "repeats: A"),
    ],
)
def test_parse_key_alphabets_errors(text, match):
    with pytest.raises(InvalidKey, match=match):
        parse_key_alphabets(text)
