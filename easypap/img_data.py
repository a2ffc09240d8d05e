"""The pair of square 32-bit RGBA images that kernels work on."""

from __future__ import annotations

from array import array
from typing import Tuple

_TYPECODE = "I" if array("I").itemsize == 4 else "L"


class ImageData:
    """Current and alternate ``dim`` x ``dim`` images of 32-bit pixels."""

    def __init__(self, dim: int) -> None:
        if dim <= 0:
            raise ValueError("image dimension must be positive")
        self.dim = dim
        self.image = array(_TYPECODE, bytes(4 * dim * dim))
        self.alt_image = array(_TYPECODE, bytes(4 * dim * dim))

    def replicate(self) -> None:
        """Copy the current image into the alternate one."""
        self.alt_image[:] = self.image

    def swap(self) -> None:
        """Exchange the current and alternate images."""
        self.image, self.alt_image = self.alt_image, self.image

    def _offset(self, pos: Tuple[int, int]) -> int:
        i, j = pos
        if not (0 <= i < self.dim and 0 <= j < self.dim):
            raise IndexError(f"pixel {pos} outside a {self.dim}x{self.dim} image")
        return i * self.dim + j

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        return self.image[self._offset(pos)]

    def __setitem__(self, pos: Tuple[int, int], value: int) -> None:
        if not 0 <= value <= 0xFFFFFFFF:
            raise OverflowError("pixel value must fit in 32 bits")
        self.image[self._offset(pos)] = value