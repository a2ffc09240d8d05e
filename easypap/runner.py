"""Set up a kernel run, iterate it and record its performance."""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .cli import Options, UsageError, parse_args, usage_text
from .constants import DEFAULT_DIM, DEFAULT_KERNEL, DEFAULT_VARIANT, time_diff, what_time_is_it
from .hooks import BindingError, Hooks, KernelRegistry
from .img_data import ImageData
from .system import omp_schedule, requested_number_of_threads

log = logging.getLogger(__name__)

DEFAULT_GRAIN = 8

PERF_FIELDS = (
    "machine", "dim", "grain", "threads", "kernel", "variant",
    "iterations", "schedule", "label", "arg", "time",
)

kernels = KernelRegistry()
"""Registry used by :func:`main`; kernels register their functions here."""


class ConfigurationError(RuntimeError):
    """The run cannot be set up or its results cannot be written."""


@dataclass
class RunResult:
    """One line of performance numbers."""

    machine: str
    dim: int
    grain: int
    threads: int
    kernel: str
    variant: str
    iterations: int
    schedule: str
    label: Optional[str]
    arg: Optional[str]
    time_us: int


def resolve_tiling(dim: int, grain: int = 0, tile_size: int = 0) -> Tuple[int, int]:
    """Complete the grain and tile size from whichever of them is given."""
    if grain == 0:
        if tile_size == 0:
            grain = DEFAULT_GRAIN
            tile_size = dim // grain
        else:
            grain = dim // tile_size
    elif tile_size == 0:
        tile_size = dim // grain
    elif grain * tile_size != dim:
        raise ConfigurationError(
            f"Inconsistency detected: GRAIN ({grain}) x TILE_SIZE ({tile_size}) != DIM ({dim})."
        )
    if grain <= 0 or tile_size <= 0:
        raise ConfigurationError(
            f"Invalid tiling: GRAIN ({grain}), TILE_SIZE ({tile_size}), DIM ({dim})"
        )
    if dim % grain:
        print(f"Warning: DIM ({dim}) is not a multiple of GRAIN ({grain})!", file=sys.stderr)
    if dim % tile_size:
        print(
            f"Warning: DIM ({dim}) is not a multiple of TILE_SIZE ({tile_size})!",
            file=sys.stderr,
        )
    return grain, tile_size


def output_perf_numbers(path: Union[str, os.PathLike], record: RunResult) -> None:
    """Append ``record`` to the CSV file at ``path``, writing a header first if empty."""
    values = list(astuple(record))
    values[PERF_FIELDS.index("label")] = "unlabelled" if record.label is None else record.label
    values[PERF_FIELDS.index("arg")] = "none" if record.arg is None else record.arg
    try:
        with open(path, "a", encoding="utf-8") as f:
            if os.fstat(f.fileno()).st_size == 0:
                f.write(";".join(PERF_FIELDS) + "\n")
            f.write(";".join(str(v) for v in values) + "\n")
    except OSError as exc:
        raise ConfigurationError(f'Cannot open "{path}" file ({exc.strerror})') from exc


class Runner:
    """Drive one kernel: bind its hooks, set up images and iterate.

    Every hook receives the runner as its first argument: ``init``,
    ``first_touch``, ``refresh_img`` and ``finalize`` take only it,
    ``draw`` also gets the draw parameter and ``compute`` the number of
    iterations to perform, returning a positive count once stable.
    """

    def __init__(self, options: Options, registry: Optional[KernelRegistry] = None) -> None:
        self.options = options
        self.registry = kernels if registry is None else registry
        self.kernel = options.kernel
        self.variant = options.variant
        self.hooks: Optional[Hooks] = None
        self.dim = options.dim
        self.grain = options.grain
        self.tile_size = options.tile_size
        self.data: Optional[ImageData] = None
        self._initialized = False

    def init_phases(self) -> None:
        """Bind the hooks, size the images, allocate them and draw the start image."""
        opts = self.options
        if self.kernel is None:
            self.kernel = DEFAULT_KERNEL
        if self.variant is None:
            self.variant = DEFAULT_VARIANT
        if opts.opencl_used:
            raise ConfigurationError("OpenCL is not available")

        self.hooks = self.registry.bind(self.kernel, self.variant, opts.first_touch)

        if not self.dim:
            self.dim = DEFAULT_DIM
        log.debug("Init phase 1: DIM = %d", self.dim)

        self.grain, self.tile_size = resolve_tiling(self.dim, self.grain, self.tile_size)

        if self.hooks.init is not None:
            self.hooks.init(self)
            log.debug("Init phase 3: init() hook called")

        self.data = ImageData(self.dim)

        if opts.first_touch and self.hooks.first_touch is not None:
            self.hooks.first_touch(self)
            log.debug("Init phase 5: first-touch() hook called")

        if self.hooks.draw is not None:
            self.hooks.draw(self, opts.draw_param)
            log.debug("Init phase 6: kernel-specific draw() hook called")
        elif not opts.first_touch or self.hooks.first_touch is None:
            self.data.replicate()

        self._initialized = True

    def run(self) -> RunResult:
        """Iterate the kernel, record the timing and return it."""
        if not self._initialized:
            self.init_phases()
        assert self.hooks is not None
        opts = self.options
        max_iter = opts.max_iter
        refresh_rate = opts.refresh_rate
        if refresh_rate == -1:
            refresh_rate = max_iter if max_iter else 1

        iterations = 0
        stable = False
        start = what_time_is_it()
        while not stable:
            if max_iter and iterations >= max_iter:
                iterations = max_iter
                stable = True
                continue
            if max_iter and iterations + refresh_rate > max_iter:
                refresh_rate = max_iter - iterations
            n = self.hooks.compute(self, refresh_rate) or 0
            if n > 0:
                iterations += n
                stable = True
            else:
                iterations += refresh_rate
        elapsed = time_diff(start, what_time_is_it())

        print(f"Computation completed after {iterations} iterations")

        result = RunResult(
            machine=platform.node(),
            dim=self.dim,
            grain=self.grain,
            threads=requested_number_of_threads(),
            kernel=self.kernel,
            variant=self.variant,
            iterations=iterations,
            schedule=omp_schedule(),
            label=opts.label,
            arg=opts.draw_param,
            time_us=elapsed,
        )
        output_perf_numbers(opts.output_file, result)
        print(f"{elapsed // 1000}.{elapsed % 1000:03d} ")

        if self.hooks.finalize is not None:
            self.hooks.finalize(self)
        self.data = None
        return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program with ``argv`` (the arguments after the program name)."""
    if argv is None:
        argv = sys.argv[1:]
        progname = Path(sys.argv[0]).name or "easypap"
    else:
        progname = "easypap"

    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(usage_text(progname), file=sys.stderr, end="")
        return 1
    if options.show_help:
        print(usage_text(progname), file=sys.stderr, end="")
        return 0
    for warning in options.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    if options.debug_flags:
        logging.basicConfig(level=logging.DEBUG)

    try:
        Runner(options).run()
    except (ConfigurationError, BindingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0