"""XYZ to sRGB color encoding with gamma correction."""

from typing import Tuple

import numpy as np

# XYZ to linear sRGB transformation matrix (D65 illuminant)
_XYZ_TO_SRGB_MATRIX = np.array(
    [
        [3.2406, -1.5372, -0.4986],
        [-0.9689, 1.8758, 0.0415],
        [0.0557, -0.2040, 1.0570],
    ]
)


def xyz_to_srgb(xyz: np.ndarray) -> np.ndarray:
    """Convert XYZ to gamma-encoded sRGB of maximal brightness.

    Out-of-gamut negative components are clipped, then the colour is scaled
    so that its brightest channel is 1; only the chromaticity of xyz matters.

    Args:
        xyz: XYZ tristimulus values

    Returns:
        np.ndarray: sRGB values in [0, 1] range
    """
    linear_srgb = np.clip(_XYZ_TO_SRGB_MATRIX @ xyz, 0.0, None)
    brightest = linear_srgb.max()
    if brightest > 0:
        linear_srgb = linear_srgb / brightest
    return _apply_srgb_gamma(linear_srgb)


def _apply_srgb_gamma(linear_srgb: np.ndarray) -> np.ndarray:
    """Apply sRGB gamma encoding.

    sRGB transfer function (IEC 61966-2-1:1999):
    - If linear_sRGB <= 0.0031308: 12.92 * linear_sRGB
    - Otherwise: 1.055 * linear_sRGB^(1/2.4) - 0.055

    Args:
        linear_srgb: Linear sRGB values in [0, 1] range

    Returns:
        np.ndarray: Gamma-encoded sRGB values
    """
    threshold = 0.0031308
    linear_srgb = np.clip(linear_srgb, 0.0, 1.0)

    result = np.where(
        linear_srgb <= threshold,
        12.92 * linear_srgb,
        1.055 * np.power(linear_srgb, 1.0 / 2.4) - 0.055,
    )

    return np.clip(result, 0.0, 1.0)


def srgb_to_8bit(srgb_normalized: np.ndarray) -> Tuple[int, int, int]:
    """Convert normalized sRGB values to an 8-bit (red, green, blue) triple.

    Args:
        srgb_normalized: sRGB values in [0, 1] range

    Returns:
        Tuple of three integers in [0, 255]
    """
    red, green, blue = np.clip(srgb_normalized * 255.0 + 0.5, 0, 255).astype(np.uint8)
    return int(red), int(green), int(blue)


def to_hex(rgb: Tuple[int, int, int]) -> str:
    """Format an 8-bit colour as ``#rrggbb``."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)
