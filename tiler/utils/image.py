import numpy as np
import numpy.typing as npt
from PIL import Image
from typing import Sequence

from tiler.types import RGBA

# Type aliases for clarity
FloatArray = npt.NDArray[np.float64]
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]

# Absorbs float error so that k/255 -> 255 * k survives truncation.
_TRUNC_EPS = 1e-6


def _normalize(color: RGBA) -> FloatArray:
    return np.asarray(color, dtype=np.float64) / 255.0


def _to_u8(values: FloatArray) -> UInt8Array:
    return np.floor(np.clip(values, 0.0, 1.0) * 255.0 + _TRUNC_EPS).astype(np.uint8)


def solid_cell(width: int, height: int, color: RGBA) -> UInt8Array:
    """Return a ``(height, width, 4)`` uint8 array filled with ``color``."""
    cell: UInt8Array = np.empty((height, width, 4), dtype=np.uint8)
    cell[...] = np.asarray(color, dtype=np.uint8)
    return cell


def blend_sqrt(bg: RGBA, fg: RGBA, coverage: FloatArray) -> UInt8Array:
    """
    Composite ``fg`` over ``bg`` by per-pixel coverage in [0, 1].

    Color channels use the square root of the coverage-weighted squares,
    ``sqrt((1 - c) * bg^2 + c * fg^2)``, while alpha is interpolated linearly.
    This is not a standard (linear or gamma-correct) alpha blend. Results are
    truncated to 8 bits. Returns an array of shape ``coverage.shape + (4,)``.
    """
    c: FloatArray = np.clip(np.asarray(coverage, dtype=np.float64), 0.0, 1.0)[..., None]
    b = _normalize(bg)
    f = _normalize(fg)

    rgb: FloatArray = np.sqrt((1.0 - c) * b[:3] ** 2 + c * f[:3] ** 2)
    alpha: FloatArray = (1.0 - c) * b[3] + c * f[3]
    return _to_u8(np.concatenate([rgb, alpha], axis=-1))


def composite_mask(
    cell: UInt8Array, mask: UInt8Array, fg: RGBA, bg: RGBA
) -> UInt8Array:
    """
    Blend ``fg`` into ``cell`` wherever the 8-bit coverage ``mask`` is non-zero.
    Pixels with zero coverage are left untouched. Returns a new array.
    """
    if mask.shape != cell.shape[:2]:
        raise ValueError(f"Mask shape {mask.shape} does not match cell {cell.shape}")
    out: UInt8Array = cell.copy()
    covered: BoolArray = mask > 0
    if covered.any():
        coverage: FloatArray = mask[covered].astype(np.float64) / 255.0
        out[covered] = blend_sqrt(bg, fg, coverage)
    return out


def hstack_images(cells: Sequence[UInt8Array]) -> Image.Image:
    """Lay equally sized RGBA cells side by side in a single Pillow image."""
    if not cells:
        raise ValueError("No cells to stack")
    return Image.fromarray(np.concatenate(list(cells), axis=1))
