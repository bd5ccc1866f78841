"""Black body spectra and their CIE XYZ tristimulus values."""

import numpy as np
from colour import SpectralDistribution, sd_to_XYZ

# Visible range sampled every 10 nm
WAVELENGTHS_NM = np.arange(380.0, 781.0, 10.0)

_PLANCK = 6.62607015e-34  # J s
_LIGHT_SPEED = 299792458.0  # m / s
_BOLTZMANN = 1.380649e-23  # J / K


def planck_radiance(wavelengths_nm: np.ndarray, kelvin: float) -> np.ndarray:
    """Spectral radiance of a black body, in W sr^-1 m^-3.

    Args:
        wavelengths_nm: Wavelengths in nanometres
        kelvin: Temperature of the black body

    Returns:
        np.ndarray: Radiance at each wavelength
    """
    wavelengths_m = np.asarray(wavelengths_nm, dtype=float) * 1e-9
    exponent = _PLANCK * _LIGHT_SPEED / (wavelengths_m * _BOLTZMANN * kelvin)
    return (2.0 * _PLANCK * _LIGHT_SPEED**2) / (wavelengths_m**5 * np.expm1(exponent))


def blackbody_xyz(kelvin: float) -> np.ndarray:
    """XYZ tristimulus values of a black body, scaled so that Y is 1.

    Uses the CIE 1931 2° standard observer.

    Args:
        kelvin: Temperature of the black body

    Returns:
        np.ndarray: XYZ tristimulus values [X, Y, Z]
    """
    radiance = planck_radiance(WAVELENGTHS_NM, kelvin)

    sd = SpectralDistribution(
        data=radiance / radiance.max(),
        domain=WAVELENGTHS_NM,
        name=f"blackbody_{kelvin:g}K",
    )

    xyz_result = sd_to_XYZ(sd, method="ASTM E308")

    xyz = np.array([xyz_result[0], xyz_result[1], xyz_result[2]])
    return xyz / xyz[1]
