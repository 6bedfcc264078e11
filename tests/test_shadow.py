"""
Drop shadows: Gaussian kernel, rasterized shapes, padded blurred alpha.
"""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image
from shapely.geometry import box

from bargraphics.core.shadow import create_drop_shadow, gaussian_kernel, rasterize_shape, shape_shadow


def test_kernel_is_normalized_and_symmetric() -> None:
    k = gaussian_kernel(3)
    assert len(k) == 7
    assert k.sum() == pytest.approx(1.0)
    assert np.allclose(k, k[::-1])
    assert k.argmax() == 3


def test_kernel_rejects_small_radius() -> None:
    with pytest.raises(ValueError):
        gaussian_kernel(0)


def test_rasterize_shape() -> None:
    image = rasterize_shape(box(5, 5, 15, 10))
    assert image.size == (10, 5)
    assert image.getpixel((5, 2))[3] == 255


def test_drop_shadow_pads_and_blurs() -> None:
    image = Image.new("RGBA", (10, 10), (255, 0, 0, 255))
    shadow = create_drop_shadow(image, 2)
    assert shadow.size == (18, 18)
    alpha = np.asarray(shadow.getchannel("A"))
    assert alpha[0, 0] == 0
    assert alpha[9, 9] == 255
    # the blur spreads into the padding
    assert 0 < alpha[9, 3] < 255
    assert shadow.getpixel((9, 9))[:3] == (0, 0, 0)


def test_shape_shadow() -> None:
    shadow = shape_shadow(box(0, 0, 20, 10), 3)
    assert shadow.size == (32, 22)
