"""Physical constants and unit conversions in SI units.

Values follow the 2018 Particle Data Group tables. Derived quantities are
computed from the base constants by the functions below.
"""

import math

PI = math.pi

# Unit conversions.
MPC_SI = 3.0857e22  # metres per megaparsec
GYR_SI = 3.1536e16  # seconds per gigayear
EV_SI = 1.602176487e-19  # joules per electron volt
ERG_SI = 1e-7  # joules per erg

# Fundamental constants.
C_SI = 2.99792458e8  # m / s
G_SI = 6.6740800e-11  # m^3 / (kg s^2)
KB_SI = 1.38064852e-23  # J / K
HBAR_SI = 1.054571800e-34  # J s

# Particle and astronomical masses in kg.
ME_SI = 9.10938356e-31
MP_SI = 1.672621898e-27
U_SI = 1.660539040e-27
MSUN_SI = 1.98847e30


def stefan_boltzmann_constant(k_b=KB_SI, hbar=HBAR_SI, c=C_SI):
    """Return sigma = pi^2 k_B^4 / (60 hbar^3 c^2) in W m^-2 K^-4."""
    return PI**2 * k_b**4 / (60.0 * hbar**3 * c**2)


def critical_density(g=G_SI, mpc=MPC_SI):
    """Return the critical density of the Universe in h^2 kg/m^3.

    This is 3 H_0^2 / (8 pi G) with H_0 = 100 h km/s/Mpc.
    """
    hubble_100 = 1e5 / mpc  # 100 km/s/Mpc in 1/s
    return 3.0 * hubble_100**2 / (8.0 * PI * g)


SIGMA_SI = stefan_boltzmann_constant()
RHOCRIT_H2_SI = critical_density()