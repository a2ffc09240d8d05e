# easypap

easypap is a small framework for learning parallel programming. It runs
iterative computations called *kernels* on a square image. It times each run
and appends the result to a CSV file, so that runs can be compared.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Kernels

A kernel is a set of plain Python functions stored in a
`easypap.hooks.KernelRegistry`. You register a function under a name with the
`register(name)` decorator. The registry looks each hook up as
`<kernel>_<hook>_<variant>` first and `<kernel>_<hook>` second. The hooks are:

| Hook | Required | Called as |
|---|---|---|
| `compute` | yes, for the exact variant | `compute(runner, n)`: perform `n` iterations; return a positive count once the computation is stable |
| `init` | no | `init(runner)` |
| `draw` | no | `draw(runner, draw_param)` |
| `ft` (first touch) | only with `--first-touch` | `ft(runner)` |
| `refresh_img` | no | bound, but not called by the runner |
| `finalize` | no | `finalize(runner)` |

A hook that is required but missing raises `BindingError`.
`KernelRegistry.bind(kernel, variant, first_touch)` returns the bound functions
as a `Hooks` value. `KernelRegistry.draw_helper(kernel, suffix, default)` calls
`<kernel>_draw_<suffix>` if that name is registered, and `default` otherwise.

```python
from easypap.cli import parse_args
from easypap.runner import Runner
from easypap.hooks import KernelRegistry

registry = KernelRegistry()

@registry.register("blank_compute_seq")
def compute(runner, n):
    for i in range(runner.dim):
        for j in range(runner.dim):
            runner.data[i, j] = 0xFFFFFFFF
    return 0

result = Runner(parse_args(["-k", "blank", "-s", "64", "-i", "10"]), registry).run()
print(result.iterations, result.time_us)
```

## Command line

```
easypap --help
```

The `easypap` command runs kernels from the registry `easypap.runner.kernels`.
No kernels come with the package. A kernel must be registered in that registry
before `easypap.runner.main` is called. If it is not, the command reports that
the compute function cannot be resolved and exits with status 1.

Options:

| Option | Meaning |
|---|---|
| `-k`, `--kernel <name>` | kernel to run (default `none`) |
| `-v`, `--variant <name>` | variant of the kernel (default `seq`) |
| `-s`, `--size <DIM>` | image of size DIM x DIM (default 1024) |
| `-g`, `--grain <G>` | use G x G tiles |
| `-ts`, `--tile-size <TS>` | use tiles of size TS x TS |
| `-i`, `--iterations <n>` | stop after n iterations |
| `-a`, `--arg <string>` | argument passed to the kernel's draw hook |
| `-lb`, `--label <name>` | label recorded with the performance numbers |
| `-of`, `--output-file <file>` | CSV file for performance numbers (default `./plots/data/perf_data.csv`) |
| `-ft`, `--first-touch` | call the kernel's first-touch hook, which then becomes required |
| `-d`, `--debug-flags <flags>` | any non-empty value turns on debug logging |
| `-h`, `--help` | print the option list |

The following options are accepted but only print a warning:

- `-m`/`--monitoring`, `-t`/`--trace`, `-th`/`--thumbs` and `-du`/`--dump`.
- `-mpi`/`--mpirun`, `-l`/`--load-image` and `-r`/`--refresh-rate`. Each of
  these also consumes its argument.

`-n`, `-nvs`, `-sr`, `-p` and `-q` are parsed into `Options` but change nothing
in a run. `-o`/`--ocl` and `-so`/`--show-ocl` make the run fail with
"OpenCL is not available". An unknown option, or an option whose value is
missing, prints an error and the option list, and the command exits with
status 1.

The runner calls `compute` in one batch covering all requested iterations, or
one iteration at a time when no limit is given. It stops once `compute`
returns a positive count. It prints the number of iterations and the elapsed
time in milliseconds.

### Tiling

`easypap.runner.resolve_tiling(dim, grain, tile_size)` works out the tiling:

- If neither the grain nor the tile size is given, the grain defaults to 8.
- If only one of them is given, the other is derived from `DIM`.
- If both are given and `GRAIN x TILE_SIZE` differs from `DIM`, the run is
  refused with `ConfigurationError`. A grain or tile size that comes out as
  zero is refused the same way.
- If `DIM` is not a multiple of the grain or of the tile size, a warning is
  printed.

### Threads and schedule

The thread count recorded with a run is taken from `OMP_NUM_THREADS`. If that
variable is not set, the number of cores is used. The schedule recorded with a
run is taken from `OMP_SCHEDULE`, and is empty if the variable is not set.
See `easypap.system`.

### Performance file

Each run appends one line to the CSV file, with `;` as the separator. When the
file is empty, a header line is written first:

```
machine;dim;grain;threads;kernel;variant;iterations;schedule;label;arg;time
```

The time is given in microseconds. A missing label is written as `unlabelled`,
and a missing draw argument as `none`. `easypap.runner.output_perf_numbers(path,
record)` writes one `RunResult` this way.

## Building blocks

- `easypap.img_data.ImageData(dim)` holds the current and alternate images of
  32-bit pixels. You can index it as `data[i, j]`. It has `replicate()` and
  `swap()`.
- `easypap.barrier.Barrier(count)` is a reusable thread barrier. `wait()`
  returns `True` in exactly one thread. `single(func)` runs `func` once, in the
  last thread to arrive, before it releases the others.
- `easypap.distrib.Distributor(nb_threads, nb_elements, finalize)` hands out
  the indices `0 .. nb_elements-1` to a team of threads through `get()`, or by
  iterating over it. When the indices run out, the threads meet at a barrier.
  The last thread to arrive calls `finalize` and resets the distributor for
  the next round.
- `easypap.constants` holds the defaults and the timing helpers
  `what_time_is_it()` and `time_diff(t1, t2)`, both in microseconds.

## What the package does not do

- It has no window, image display, monitoring, tracing, thumbnails or image
  loading and saving.
- It has no OpenCL or MPI support.
- It has no pool of worker threads for running tasks. Kernels that want
  threads create their own, and can coordinate them with `Barrier` and
  `Distributor`.