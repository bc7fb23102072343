import string

from tclib.nanoid import nanoid

URL_SAFE = set(string.ascii_letters + string.digits + "_-")


def test_unseeded_identifier_shape():
    ident = nanoid()
    assert len(ident) == 21
    assert set(ident) <= URL_SAFE


def test_zero_seed_uses_system_entropy():
    ident = nanoid(0)
    assert len(ident) == 21
    assert set(ident) <= URL_SAFE


def test_same_seed_is_deterministic():
    first = nanoid(42)
    second = nanoid(42)
    assert len(first) == 21
    assert set(first) <= URL_SAFE
    assert first == second


def test_different_seeds_give_different_ids():
    first = nanoid(1)
    second = nanoid(2)
    assert len(first) == len(second) == 21
    assert first != second


def test_reference_seed_prefix():
    assert nanoid(5489).startswith("c2u")