from easypap.system import number_of_cores, omp_schedule, requested_number_of_threads


def test_number_of_cores_is_positive():
    assert number_of_cores() >= 1


def test_requested_threads_from_environment():
    assert requested_number_of_threads({"OMP_NUM_THREADS": "6"}) == 6


def test_requested_threads_defaults_to_cores():
    assert requested_number_of_threads({}) == number_of_cores()


def test_requested_threads_non_numeric_is_zero():
    assert requested_number_of_threads({"OMP_NUM_THREADS": "abc"}) == 0


def test_requested_threads_uses_leading_digits():
    assert requested_number_of_threads({"OMP_NUM_THREADS": "12xyz"}) == 12


def test_omp_schedule_unset_is_empty():
    assert omp_schedule({}) == ""


def test_omp_schedule_is_returned_verbatim():
    assert omp_schedule({"OMP_SCHEDULE": "dynamic,4"}) == "dynamic,4"