"""Preset sets of cosmological parameters."""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Mapping, TextIO


def _planck(h, omega_m, omega_b, omega_de, n_s, a_s, yhe):
    return MappingProxyType(
        {
            "h": h,
            "Omega_m": omega_m,
            "Omega_b": omega_b,
            "Omega_DE": omega_de,
            "w_0": -1.0,
            "w_a": 0.0,
            "n_s": n_s,
            "A_s": a_s,
            "k_p": 0.05,
            "YHe": yhe,
            "N_ur": 2.046,
            "m_nu1": 0.06,
            "m_nu2": 0.0,
            "m_nu3": 0.0,
            "Tcmb": 2.7255,
        }
    )


#: Planck 2018 baseline cosmologies, keyed by name.
PARAMETER_SETS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        # base_plikHM_TTTEEE_lowl_lowE_lensing
        "Planck2018EE": _planck(
            0.67321, 0.3158, 0.04938898, 0.6842, 0.96605, 2.1005e-9, 0.245401
        ),
        # base_plikHM_TTTEEE_lowl_lowE_lensing_post_BAO
        "Planck2018EE+BAO": _planck(
            0.67702, 0.3106, 0.04897284, 0.6894, 0.96824, 2.1073e-9, 0.245425
        ),
        # base_plikHM_TTTEEE_lowl_lowE_lensing_post_Pantheon
        "Planck2018EE+SN": _planck(
            0.6749, 0.3134, 0.04919537, 0.6866, 0.96654, 2.1020e-9, 0.245411
        ),
        # base_plikHM_TTTEEE_lowl_lowE_lensing_post_BAO_Pantheon
        "Planck2018EE+BAO+SN": _planck(
            0.67742, 0.3099, 0.048891054, 0.6901, 0.96822, 2.1064e-9, 0.245421
        ),
    }
)


def available_sets() -> list[str]:
    """Return the names of all preset parameter sets, sorted."""
    return sorted(PARAMETER_SETS)


def get_parameter_set(name: str) -> dict[str, float]:
    """Return a fresh copy of the named parameter set.

    Raises KeyError if no such set exists.
    """
    try:
        return dict(PARAMETER_SETS[name])
    except KeyError:
        raise KeyError(f"unknown cosmology parameter set '{name}'") from None


def print_parameter_sets(stream: TextIO | None = None) -> None:
    """Write the list of available parameter sets to a stream."""
    out = sys.stdout if stream is None else stream
    out.write("Available cosmology parameter sets:\n")
    for name in available_sets():
        out.write(f"  {name}\n")
    out.write("\n")