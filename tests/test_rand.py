import sys
from unittest import mock

from tclib.rand import JsfRandom, rand, srand, system_seed

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _take(gen, count):
    return [gen.rand() for _ in range(count)]


def test_same_seed_same_sequence():
    first = _take(JsfRandom(1234), 50)
    second = _take(JsfRandom(1234), 50)
    assert len(first) == 50
    assert len(set(first)) > 40
    assert first == second


def test_different_seeds_differ():
    assert _take(JsfRandom(1), 20) != _take(JsfRandom(2), 20)


def test_reseed_restarts_sequence():
    gen = JsfRandom(99)
    first = _take(gen, 10)
    gen.seed(99)
    assert _take(gen, 10) == first


def test_values_are_signed_32_bit():
    values = _take(JsfRandom(7), 1000)
    assert all(INT32_MIN <= v <= INT32_MAX for v in values)
    assert any(v < 0 for v in values)
    assert any(v > 0 for v in values)


def test_seed_is_masked_to_32_bits():
    assert _take(JsfRandom(5 + 2**32), 10) == _take(JsfRandom(5), 10)


def test_unseeded_generators_agree():
    first = _take(JsfRandom(), 10)
    second = _take(JsfRandom(), 10)
    assert len(set(first)) == 10
    assert all(INT32_MIN <= v <= INT32_MAX for v in first)
    assert first == second


def test_unseeded_differs_from_seeded():
    assert _take(JsfRandom(), 10) != _take(JsfRandom(0), 10)


def test_module_level_functions_follow_seed():
    srand(42)
    values = [rand() for _ in range(10)]
    assert values == _take(JsfRandom(42), 10)


def test_system_seed_in_range():
    for _ in range(5):
        seed = system_seed()
        assert 0 <= seed <= 0xFFFFFFFF


def test_system_seed_reads_entropy_bytes():
    data = b"\x01\x02\x03\x04"
    with mock.patch("builtins.open", mock.mock_open(read_data=data)):
        seed = system_seed()
    assert seed == int.from_bytes(data, sys.byteorder)


def test_system_seed_falls_back_without_entropy():
    with mock.patch("builtins.open", side_effect=OSError):
        seed = system_seed()
    reference = JsfRandom(0)
    assert seed == reference.rand() & 0xFFFFFFFF
    assert rand() == reference.rand()