# tests/unit/test_image.py

import numpy as np
import pytest

from tiler.utils.image import blend_sqrt, composite_mask, hstack_images, solid_cell

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def test_blend_endpoints_and_midpoint() -> None:
    out = blend_sqrt(BLACK, WHITE, np.array([0.0, 0.5, 1.0]))
    assert out.dtype == np.uint8
    assert out.tolist() == [
        [0, 0, 0, 255],
        [180, 180, 180, 255],
        [255, 255, 255, 255],
    ]


def test_blend_is_root_of_weighted_squares() -> None:
    # sqrt(0.75 * (100/255)^2 + 0.25 * (200/255)^2) * 255 = 132.28...
    out = blend_sqrt((100, 100, 100, 255), (200, 200, 200, 255), np.array([0.25]))
    assert out.tolist() == [[132, 132, 132, 255]]


def test_blend_alpha_is_linear() -> None:
    out = blend_sqrt((0, 0, 0, 0), (0, 0, 0, 255), np.array([0.5]))
    assert out[0, 3] == 127


@pytest.mark.parametrize("level", [1, 17, 128, 200, 254])
def test_full_coverage_returns_exact_foreground(level: int) -> None:
    fg = (level, 255 - level, level // 2, 255)
    out = blend_sqrt((9, 9, 9, 255), fg, np.array([1.0]))
    assert tuple(out[0]) == fg


def test_composite_mask_leaves_uncovered_pixels() -> None:
    cell = solid_cell(2, 2, (10, 20, 30, 255))
    mask = np.array([[0, 255], [0, 0]], dtype=np.uint8)
    out = composite_mask(cell, mask, WHITE, (10, 20, 30, 255))
    assert out[0, 0].tolist() == [10, 20, 30, 255]
    assert out[0, 1].tolist() == [255, 255, 255, 255]
    assert out[1, 1].tolist() == [10, 20, 30, 255]
    # input untouched
    assert cell[0, 1].tolist() == [10, 20, 30, 255]


def test_composite_mask_shape_mismatch() -> None:
    with pytest.raises(ValueError):
        composite_mask(
            solid_cell(2, 2, BLACK), np.zeros((3, 2), dtype=np.uint8), WHITE, BLACK
        )


def test_solid_cell_shape() -> None:
    cell = solid_cell(20, 40, (1, 2, 3, 4))
    assert cell.shape == (40, 20, 4)
    assert cell.size == 20 * 40 * 4
    assert cell[39, 19].tolist() == [1, 2, 3, 4]


def test_hstack_images() -> None:
    img = hstack_images([solid_cell(2, 3, BLACK), solid_cell(2, 3, WHITE)])
    assert img.size == (4, 3)
    assert img.mode == "RGBA"
    assert img.getpixel((3, 0)) == WHITE


def test_hstack_requires_cells() -> None:
    with pytest.raises(ValueError):
        hstack_images([])
