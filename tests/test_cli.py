import pytest

from easypap.cli import DEFAULT_OUTPUT_FILE, Options, UsageError, parse_args, usage_text


def test_defaults():
    options = parse_args([])
    assert options == Options()
    assert options.output_file == "./plots/data/perf_data.csv"
    assert options.refresh_rate == -1
    assert options.kernel is None and options.variant is None
    assert options.display and options.vsync


def test_switches():
    options = parse_args(["-nvs", "--no-display", "-p", "--quit", "-sr", "-ft"])
    assert not options.vsync
    assert not options.display
    assert options.pause and options.quit_when_done
    assert options.soft_rendering and options.first_touch


def test_show_ocl_enables_opencl():
    options = parse_args(["--show-ocl"])
    assert options.show_ocl_config and options.opencl_used
    assert parse_args(["-o"]).opencl_used
    assert not parse_args(["-o"]).show_ocl_config


def test_valued_options():
    options = parse_args(
        ["-k", "blur", "--variant", "omp", "-s", "256", "-g", "4", "-ts", "64",
         "-i", "12", "-a", "spiral", "-lb", "run", "-of", "out.csv", "-d", "ig"]
    )
    assert options.kernel == "blur"
    assert options.variant == "omp"
    assert (options.dim, options.grain, options.tile_size) == (256, 4, 64)
    assert options.max_iter == 12
    assert options.draw_param == "spiral"
    assert options.label == "run"
    assert options.output_file == "out.csv"
    assert options.debug_flags == "ig"


def test_numbers_are_parsed_leniently():
    assert parse_args(["-s", "12abc"]).dim == 12
    assert parse_args(["--iterations", "abc"]).max_iter == 0


@pytest.mark.parametrize(
    "argv, message",
    [
        (["-k"], "kernel name is missing"),
        (["--size"], "DIM is missing"),
        (["-a"], "parameter string is missing"),
        (["-of"], "filename is missing"),
    ],
)
def test_missing_value(argv, message):
    with pytest.raises(UsageError, match=message):
        parse_args(argv)


def test_unknown_option():
    with pytest.raises(UsageError, match="unknown option --bogus"):
        parse_args(["-q", "--bogus"])


def test_help_stops_parsing():
    options = parse_args(["-h", "--bogus"])
    assert options.show_help


def test_ignored_options_warn():
    options = parse_args(["-m", "--trace", "-th", "-du"])
    assert len(options.warnings) == 4
    assert options == Options(warnings=options.warnings)


def test_ignored_options_skip_their_argument():
    options = parse_args(["-l", "img.png", "-mpi", "-np 4", "-r", "5", "-s", "32"])
    assert options.dim == 32
    assert options.refresh_rate == -1
    assert len(options.warnings) == 3


def test_ignored_option_without_argument_at_end():
    options = parse_args(["--mpirun"])
    assert len(options.warnings) == 1


def test_usage_text_lists_options():
    text = usage_text("prog")
    assert text.startswith("Usage: prog [options]")
    for option in ("--tile-size", "--output-file", "--kernel", "-nvs"):
        assert option in text
    assert DEFAULT_OUTPUT_FILE not in text