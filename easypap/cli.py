"""Command-line options of a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .system import _atoi

DEFAULT_OUTPUT_FILE = "./plots/data/perf_data.csv"


class UsageError(ValueError):
    """The command line cannot be understood."""


@dataclass
class Options:
    """Settings chosen on the command line."""

    vsync: bool = True
    display: bool = True
    pause: bool = False
    quit_when_done: bool = False
    soft_rendering: bool = False
    show_ocl_config: bool = False
    opencl_used: bool = False
    first_touch: bool = False
    draw_param: Optional[str] = None
    label: Optional[str] = None
    kernel: Optional[str] = None
    variant: Optional[str] = None
    dim: int = 0
    grain: int = 0
    tile_size: int = 0
    max_iter: int = 0
    refresh_rate: int = -1
    debug_flags: Optional[str] = None
    output_file: str = DEFAULT_OUTPUT_FILE
    show_help: bool = False
    warnings: List[str] = field(default_factory=list)


_USAGE: Tuple[Tuple[str, str, str], ...] = (
    ("-a", "--arg <string>", "pass argument <string> to draw function"),
    ("-d", "--debug-flags <flags>", "enable debug messages"),
    ("-du", "--dump", "dump final image to disk"),
    ("-ft", "--first-touch", "touch memory on different cores"),
    ("-g", "--grain <G>", "use G x G tiles"),
    ("-h", "--help", "display help"),
    ("-i", "--iterations <n>", "stop after n iterations"),
    ("-k", "--kernel <name>", "override KERNEL environment variable"),
    ("-lb", "--label <name>", "assign name <label> to current run"),
    ("-l", "--load-image <file>", "use PNG image <file>"),
    ("-m", "--monitoring", "enable graphical thread monitoring"),
    ("-mpi", "--mpirun <args>", "pass <args> to the mpirun MPI process launcher"),
    ("-n", "--no-display", "avoid graphical display overhead"),
    ("-nvs", "--no-vsync", "disable vertical sync"),
    ("-o", "--ocl", "use OpenCL version"),
    ("-of", "--output-file <file>", "output performance numbers in <file>"),
    ("-p", "--pause", "pause between iterations (press space to continue)"),
    ("-q", "--quit", "exit once iterations are done"),
    ("-r", "--refresh-rate <N>", "display only 1/Nth of images"),
    ("-s", "--size <DIM>", "use image of size DIM x DIM"),
    ("-sr", "--soft-rendering", "disable hardware acceleration"),
    ("-so", "--show-ocl", "display OpenCL platform and devices"),
    ("-th", "--thumbs", "generate thumbnails"),
    ("-ts", "--tile-size <TS>", "use tiles of size TS x TS"),
    ("-t", "--trace", "enable trace"),
    ("-v", "--variant <name>", "select variant <name> of kernel"),
)

_HELP = frozenset({"--help", "-h"})

# Options that only switch settings: option -> {attribute: value}
_FLAGS: Dict[str, Dict[str, bool]] = {}
for _names, _settings in (
    (("--no-vsync", "-nvs"), {"vsync": False}),
    (("--no-display", "-n"), {"display": False}),
    (("--pause", "-p"), {"pause": True}),
    (("--quit", "-q"), {"quit_when_done": True}),
    (("--soft-rendering", "-sr"), {"soft_rendering": True}),
    (("--show-ocl", "-so"), {"show_ocl_config": True, "opencl_used": True}),
    (("--first-touch", "-ft"), {"first_touch": True}),
    (("--ocl", "-o"), {"opencl_used": True}),
):
    for _name in _names:
        _FLAGS[_name] = _settings

# Options that are accepted but have no effect here.
_IGNORED: Dict[str, str] = {}
for _names, _message in (
    (("--monitoring", "-m"), "cannot monitor execution without a display"),
    (("--trace", "-t"), "cannot generate trace: tracing is not available"),
    (("--thumbs", "-th"), "cannot generate thumbnails without a display"),
    (("--dump", "-du"), "cannot dump image to disk without a display"),
):
    for _name in _names:
        _IGNORED[_name] = _message

# Options with an argument that are accepted but have no effect here.
_IGNORED_WITH_ARG: Dict[str, str] = {}
for _names, _message in (
    (("--mpirun", "-mpi"), "--mpirun has no effect: MPI is not available"),
    (("--load-image", "-l"), "cannot load image without a display"),
    (("--refresh-rate", "-r"), "--refresh-rate has no effect without a display"),
):
    for _name in _names:
        _IGNORED_WITH_ARG[_name] = _message

_Converter = Callable[[str], object]

# Options taking a value: option -> (attribute, converter, message if missing)
_VALUED: Dict[str, Tuple[str, _Converter, str]] = {}
for _names, _spec in (
    (("--arg", "-a"), ("draw_param", str, "parameter string is missing")),
    (("--label", "-lb"), ("label", str, "parameter string is missing")),
    (("--kernel", "-k"), ("kernel", str, "kernel name is missing")),
    (("--size", "-s"), ("dim", _atoi, "DIM is missing")),
    (("--grain", "-g"), ("grain", _atoi, "grain size is missing")),
    (("--tile-size", "-ts"), ("tile_size", _atoi, "tile size is missing")),
    (("--variant", "-v"), ("variant", str, "variant name is missing")),
    (("--iterations", "-i"), ("max_iter", _atoi, "number of iterations is missing")),
    (("--debug-flags", "-d"), ("debug_flags", str, "debug flags list is missing")),
    (("--output-file", "-of"), ("output_file", str, "filename is missing")),
):
    for _name in _names:
        _VALUED[_name] = _spec


def usage_text(progname: str) -> str:
    """Return the help text listing every option."""
    width = max(len(long) for _, long, _ in _USAGE)
    lines = [f"Usage: {progname} [options]", "options can be:"]
    lines.extend(
        f"  {short:<5}| {long:<{width}} : {text}" for short, long, text in _USAGE
    )
    return "\n".join(lines) + "\n"


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    options = Options()
    args = iter(argv)
    for arg in args:
        if arg in _HELP:
            options.show_help = True
            return options
        if arg in _FLAGS:
            for attr, value in _FLAGS[arg].items():
                setattr(options, attr, value)
        elif arg in _IGNORED:
            options.warnings.append(_IGNORED[arg])
        elif arg in _IGNORED_WITH_ARG:
            options.warnings.append(_IGNORED_WITH_ARG[arg])
            next(args, None)
        elif arg in _VALUED:
            attr, convert, missing = _VALUED[arg]
            value = next(args, None)
            if value is None:
                raise UsageError(missing)
            setattr(options, attr, convert(value))
        else:
            raise UsageError(f"unknown option {arg}")
    return options