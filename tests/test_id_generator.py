from catalog.utils.id_generator import MonotonicIdGenerator


def test_ids_increase_when_clock_stands_still():
    gen = MonotonicIdGenerator(clock=lambda: 5000)
    assert [gen.next_id() for _ in range(3)] == [5000, 5001, 5002]


def test_ids_follow_clock_when_it_moves_ahead():
    ticks = iter([100, 900, 901])
    gen = MonotonicIdGenerator(clock=lambda: next(ticks))
    assert [gen.next_id() for _ in range(3)] == [100, 900, 901]


def test_clock_going_backwards_never_repeats_ids():
    ticks = iter([1000, 10, 10])
    gen = MonotonicIdGenerator(clock=lambda: next(ticks))
    assert [gen.next_id() for _ in range(3)] == [1000, 1001, 1002]


def test_taken_ids_are_skipped():
    gen = MonotonicIdGenerator(clock=lambda: 7)
    assert gen.next_id(taken={7, 8}) == 9
    assert gen.next_id() == 10


def test_default_clock_is_milliseconds():
    gen = MonotonicIdGenerator()
    assert gen.next_id() > 1_600_000_000_000
