from itertools import islice

from tclib.mtrand import MersenneTwister


def test_reference_first_output_default_seed():
    assert MersenneTwister(5489).next() == 3499211612


def test_reference_ten_thousandth_output():
    gen = MersenneTwister(5489)
    value = None
    for _ in range(10000):
        value = gen.next()
    assert value == 4123659995


def test_reference_first_output_seed_one():
    assert MersenneTwister(1).next() == 1791095845


def test_same_seed_same_sequence():
    a = MersenneTwister(2024)
    b = MersenneTwister(2024)
    assert [a.next() for _ in range(1500)] == [b.next() for _ in range(1500)]


def test_different_seeds_differ():
    a = MersenneTwister(10)
    b = MersenneTwister(11)
    assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]


def test_seed_is_masked_to_32_bits():
    a = MersenneTwister(5489 + 2**32)
    b = MersenneTwister(5489)
    assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]


def test_outputs_are_unsigned_32_bit_across_twists():
    gen = MersenneTwister(77)
    values = [gen.next() for _ in range(2000)]
    assert all(0 <= v <= 0xFFFFFFFF for v in values)
    assert len(set(values)) > 1900


def test_iteration_matches_next():
    a = MersenneTwister(3)
    b = MersenneTwister(3)
    assert list(islice(a, 700)) == [b.next() for _ in range(700)]


def test_zero_seed_draws_system_seed():
    gen = MersenneTwister(0)
    values = [gen.next() for _ in range(100)]
    assert all(0 <= v <= 0xFFFFFFFF for v in values)
    assert len(set(values)) > 90