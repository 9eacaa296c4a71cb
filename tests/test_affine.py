import pytest

from classicalcrypto import AffineCipher, AffineKey, Ciphertext, InvalidKey, KeyErrorReason, Plaintext
from classicalcrypto.classical.common import modinv
from classicalcrypto.classical.monoalphabetic.affine import UNITS

cipher = AffineCipher()


def test_stinson_hot():
    key = cipher.make_key((7, 3))
    assert str(cipher.encrypt(key, Plaintext.from_str("hot"))) == "AXG"
    assert str(cipher.decrypt(key, Ciphertext.from_str("AXG"))) == "hot"


def test_inverse_is_precomputed():
    assert cipher.make_key((7, 3)).a_inv == 15
    assert modinv(7, 26) == 15


def test_units():
    assert UNITS == (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)


@pytest.mark.parametrize("a", UNITS)
@pytest.mark.parametrize("b", [0, 1, 13, 25])
def test_round_trip(a, b, english):
    key = cipher.make_key((a, b))
    assert cipher.decrypt(key, cipher.encrypt(key, english)) == english


@pytest.mark.parametrize("a", UNITS)
def test_encrypt_is_injective(a):
    key = cipher.make_key((a, 5))
    assert {cipher.encrypt_residue(key, p) for p in range(26)} == set(range(26))


@pytest.mark.parametrize("a", [a for a in range(26) if a not in UNITS])
def test_non_invertible_multiplier(a):
    with pytest.raises(InvalidKey) as exc:
        cipher.make_key((a, 1))
    assert exc.value.reason is KeyErrorReason.NOT_INVERTIBLE


@pytest.mark.parametrize("value", [(26, 1), (1, 26), (-1, 0), (3,), (1, 2, 3), 5, ("a", "b")])
def test_out_of_range(value):
    with pytest.raises(InvalidKey) as exc:
        cipher.make_key(value)
    assert exc.value.reason is KeyErrorReason.OUT_OF_RANGE


def test_range_is_checked_before_invertibility():
    with pytest.raises(InvalidKey) as exc:
        cipher.make_key((28, 0))
    assert exc.value.reason is KeyErrorReason.OUT_OF_RANGE


@pytest.mark.parametrize("text", ["5,8", "5:8", "5 8", " 5 , 8 "])
def test_parse_key_formats(text):
    assert cipher.parse_key(text) == AffineKey(5, 8)


def test_parse_key_errors():
    with pytest.raises(InvalidKey):
        cipher.parse_key("5")
    with pytest.raises(InvalidKey):
        cipher.parse_key("x,y")
    with pytest.raises(InvalidKey) as exc:
        cipher.parse_key("2,8")
    assert exc.value.reason is KeyErrorReason.NOT_INVERTIBLE


def test_export_round_trip():
    key = cipher.make_key((11, 4))
    assert key.export() == "11,4"
    assert cipher.parse_key(key.export()) == key


def test_random_keys_are_valid(rng):
    for _ in range(500):
        key = cipher.random_key(rng)
        assert key.a in UNITS
        assert 0 <= key.b < 26


def test_keyspace_size():
    keys = list(cipher.keyspace())
    assert len(keys) == 312
    assert len(set(keys)) == 312


def test_a_equal_one_is_a_shift():
    from classicalcrypto import ShiftCipher

    shift = ShiftCipher()
    msg = Plaintext.from_str("attackatdawn")
    assert cipher.encrypt(cipher.make_key((1, 3)), msg) == shift.encrypt(shift.make_key(3), msg)


def test_key_class_rejects_non_invertible_multiplier():
    with pytest.raises(InvalidKey) as exc:
        AffineKey(13, 0)
    assert exc.value.reason is KeyErrorReason.NOT_INVERTIBLE


@pytest.mark.parametrize("a, b", [(26, 0), (1, -1), (3, 26), (True, 0)])
def test_key_class_rejects_out_of_range(a, b):
    with pytest.raises(InvalidKey) as exc:
        AffineKey(a, b)
    assert exc.value.reason is KeyErrorReason.OUT_OF_RANGE


def test_directly_built_key_round_trips(english):
    key = AffineKey(9, 2)
    assert key.a_inv == 3
    assert cipher.decrypt(key, cipher.encrypt(key, english)) == english
