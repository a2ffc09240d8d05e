from easypap.constants import time_diff, what_time_is_it


def test_what_time_is_it_does_not_go_backwards():
    first = what_time_is_it()
    second = what_time_is_it()
    assert time_diff(first, second) >= 0


def test_time_diff_of_identical_times_is_zero():
    now = what_time_is_it()
    assert time_diff(now, now) == 0


def test_time_diff_one_second_in_timeval_form():
    assert time_diff((0, 0), (1, 0)) == 1_000_000


def test_time_diff_is_antisymmetric():
    a = (12, 345)
    b = (20, 999_000)
    assert time_diff(a, b) == -time_diff(b, a)


def test_time_diff_mixes_forms():
    assert time_diff((3, 250), 3_000_250) == 0