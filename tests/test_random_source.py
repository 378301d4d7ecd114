from wiremaster.services.random_source import SeededRandom, LCG_INCREMENT, LCG_MODULUS


def test_first_value_follows_lcg():
    rng = SeededRandom(0)
    assert rng.next_float() == LCG_INCREMENT / LCG_MODULUS


def test_same_seed_same_stream():
    a = SeededRandom(12345)
    b = SeededRandom(12345)
    assert [a.next_float() for _ in range(50)] == [b.next_float() for _ in range(50)]


def test_different_seeds_diverge():
    a = SeededRandom(1)
    b = SeededRandom(2)
    assert [a.next_float() for _ in range(5)] != [b.next_float() for _ in range(5)]


def test_seed_is_masked_to_32_bits():
    assert SeededRandom(2 ** 32 + 7).seed == 7
    a = SeededRandom(-1)
    b = SeededRandom(0xFFFFFFFF)
    assert a.next_float() == b.next_float()


def test_next_float_in_unit_interval():
    rng = SeededRandom(99)
    for _ in range(1000):
        value = rng.next_float()
        assert 0.0 <= value < 1.0


def test_next_int_is_inclusive():
    rng = SeededRandom(7)
    values = {rng.next_int(3, 6) for _ in range(500)}
    assert values == {3, 4, 5, 6}


def test_next_int_degenerate_range():
    rng = SeededRandom(7)
    assert rng.next_int(5, 5) == 5
    assert rng.next_int(9, 2) == 9


def test_chance_extremes():
    rng = SeededRandom(3)
    assert not any(rng.chance(0.0) for _ in range(100))
    assert all(rng.chance(1.0) for _ in range(100))


def test_shuffle_returns_new_permutation():
    items = list(range(20))
    shuffled = SeededRandom(42).shuffle(items)
    assert items == list(range(20))
    assert sorted(shuffled) == items
    assert shuffled == SeededRandom(42).shuffle(items)

