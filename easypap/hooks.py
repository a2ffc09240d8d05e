"""Resolve a kernel's functions by name from a registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, TypeVar

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

_OPTIONAL, _REQUIRED, _VARIANT_REQUIRED = 0, 1, 2


class BindingError(LookupError):
    """A required kernel function cannot be resolved."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Cannot resolve function [{symbol}]")
        self.symbol = symbol


@dataclass
class Hooks:
    """The functions bound for one kernel and variant."""

    compute: Callable
    init: Optional[Callable] = None
    draw: Optional[Callable] = None
    finalize: Optional[Callable] = None
    refresh_img: Optional[Callable] = None
    first_touch: Optional[Callable] = None


class KernelRegistry:
    """Named kernel functions, looked up as ``<kernel>_<hook>[_<variant>]``."""

    def __init__(self) -> None:
        self._symbols: Dict[str, Callable] = {}

    def register(self, name: str) -> Callable[[F], F]:
        """Decorator registering a function under ``name``."""

        def decorator(func: F) -> F:
            self._symbols[name] = func
            return func

        return decorator

    def find(self, symbol: str) -> Optional[Callable]:
        """Return the function registered as ``symbol``, or None."""
        return self._symbols.get(symbol)

    def _bind_it(self, kernel: str, hook: str, variant: str, level: int) -> Optional[Callable]:
        name = f"{kernel}_{hook}_{variant}"
        func = self.find(name)
        if func is not None:
            log.debug("Found [%s]", name)
            return func
        if level == _VARIANT_REQUIRED:
            raise BindingError(name)
        name = f"{kernel}_{hook}"
        func = self.find(name)
        if func is not None:
            log.debug("Found [%s]", name)
        elif level:
            raise BindingError(name)
        return func

    def bind(self, kernel: str, variant: str, first_touch: bool = False) -> Hooks:
        """Bind every hook of ``kernel`` for ``variant``.

        The compute function must exist for the exact variant; the
        first-touch function is required only when ``first_touch`` is set.
        """
        log.info("Using kernel [%s], variant [%s]", kernel, variant)
        compute = self._bind_it(kernel, "compute", variant, _VARIANT_REQUIRED)
        return Hooks(
            compute=compute,
            init=self._bind_it(kernel, "init", variant, _OPTIONAL),
            draw=self._bind_it(kernel, "draw", variant, _OPTIONAL),
            finalize=self._bind_it(kernel, "finalize", variant, _OPTIONAL),
            refresh_img=self._bind_it(kernel, "refresh_img", variant, _OPTIONAL),
            first_touch=self._bind_it(
                kernel, "ft", variant, _REQUIRED if first_touch else _OPTIONAL
            ),
        )

    def draw_helper(self, kernel: str, suffix: Optional[str], default: Callable[[], object]) -> object:
        """Call ``<kernel>_draw_<suffix>`` if registered, else ``default``."""
        func: Callable = default
        if suffix is not None:
            name = f"{kernel}_draw_{suffix}"
            found = self.find(name)
            if found is None:
                log.debug("Cannot resolve draw function: %s", name)
            else:
                func = found
        return func()