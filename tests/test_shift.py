import dataclasses

import pytest

from classicalcrypto import (
    Ciphertext,
    InvalidKey,
    KeyErrorReason,
    Plaintext,
    ShiftCipher,
    ShiftKey,
)

from conftest import STINSON_CIPHERTEXT, STINSON_MSG

cipher = ShiftCipher()


def test_hello_with_key_3():
    key = cipher.make_key(3)
    ct = cipher.encrypt(key, Plaintext.from_str("HELLO"))
    assert str(ct) == "KHOOR"
    assert cipher.decrypt(key, Ciphertext.from_str("KHOOR")) == Plaintext.from_str("HELLO")


def test_stinson_example():
    key = cipher.make_key(11)
    ct = cipher.encrypt(key, Plaintext.from_str(STINSON_MSG))
    assert str(ct) == STINSON_CIPHERTEXT
    assert str(cipher.decrypt(key, ct)) == STINSON_MSG


def test_wraps_around():
    key = cipher.make_key(25)
    assert str(cipher.encrypt(key, Plaintext.from_str("abz"))) == "ZAY"


def test_key_zero_is_the_identity():
    key = cipher.make_key(0)
    msg = Plaintext.from_str("intheclear")
    assert str(cipher.encrypt(key, msg)) == "INTHECLEAR"


@pytest.mark.parametrize("k", range(26))
def test_round_trip_every_key(k, english):
    key = cipher.make_key(k)
    assert cipher.decrypt(key, cipher.encrypt(key, english)) == english


@pytest.mark.parametrize("k", range(26))
def test_encrypt_is_injective(k):
    key = cipher.make_key(k)
    images = {cipher.encrypt_residue(key, p) for p in range(26)}
    assert images == set(range(26))


@pytest.mark.parametrize("value", [26, -1, 100])
def test_make_key_out_of_range(value):
    with pytest.raises(InvalidKey) as exc:
        cipher.make_key(value)
    assert exc.value.reason is KeyErrorReason.OUT_OF_RANGE


@pytest.mark.parametrize("value", ["3", 3.0, True, None])
def test_make_key_rejects_non_integers(value):
    with pytest.raises(InvalidKey):
        cipher.make_key(value)


def test_parse_and_export():
    assert cipher.parse_key(" 7 ") == ShiftKey(7)
    assert cipher.make_key(7).export() == "7"
    with pytest.raises(InvalidKey):
        cipher.parse_key("seven")
    with pytest.raises(InvalidKey):
        cipher.parse_key("26")


def test_keys_are_immutable():
    key = cipher.make_key(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        key.shift = 4


def test_random_keys_are_valid_and_uniform(rng):
    counts = [0] * 26
    for _ in range(26_000):
        counts[cipher.random_key(rng).shift] += 1
    assert all(800 < c < 1200 for c in counts)


def test_wrong_key_does_not_decrypt(rng):
    msg = Plaintext.from_str("thisisyetanothertestmessage")
    ct = cipher.encrypt(cipher.make_key(4), msg)
    assert cipher.decrypt(cipher.make_key(5), ct) != msg


def test_keyspace():
    assert [k.shift for k in cipher.keyspace()] == list(range(26))


def test_misuse_is_rejected():
    key = cipher.make_key(3)
    ct = cipher.encrypt(key, Plaintext.from_str("abc"))
    with pytest.raises(TypeError):
        cipher.encrypt(key, ct)
    with pytest.raises(TypeError):
        cipher.decrypt(key, Plaintext.from_str("abc"))
    with pytest.raises(TypeError):
        cipher.encrypt(3, Plaintext.from_str("abc"))


@pytest.mark.parametrize("value", [26, -1, "3", True])
def test_key_class_validates_on_construction(value):
    with pytest.raises(InvalidKey) as exc:
        ShiftKey(value)
    assert exc.value.reason is KeyErrorReason.OUT_OF_RANGE


def test_directly_built_key_round_trips(english):
    key = ShiftKey(13)
    assert cipher.decrypt(key, cipher.encrypt(key, english)) == english
