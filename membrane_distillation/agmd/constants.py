"""Physical constants and correlation coefficients for the AGMD closure model.

All values are fixed by the domain and must not be changed at run time; the
closures reproduce reference results only with these exact numbers.
"""

# Universal gas constant (J/mol/K)
GAS_CONSTANT = 8.314

# Molar mass of water (kg/mol)
WATER_MOLAR_MASS = 0.018

# Standard atmospheric pressure (Pa)
ATM_PRESSURE = 101325.0

# Solid sodium chloride
NACL_DENSITY = 2160.0  # kg/m³
NACL_MOLAR_MASS = 58.44e-3  # kg/mol

# Water vapor / air molecular diffusion: P·D = 4.46e-6 · (ε/τ) · T^2.334 (Pa·m²/s)
MOLECULAR_DIFFUSION_PREFACTOR = 4.46e-6
MOLECULAR_DIFFUSION_EXPONENT = 2.334

# Spacer-filled channel correlation: 0.22 · Re^0.69 · X^0.13 · (X/X_w)^0.25
CHANNEL_COEFFICIENT = 0.22
CHANNEL_REYNOLDS_EXPONENT = 0.69
CHANNEL_PRANDTL_EXPONENT = 0.13
CHANNEL_WALL_EXPONENT = 0.25

# Maxwell mixing rule prefactor for the membrane conductivity
MAXWELL_PREFACTOR = 0.93

# NaCl diffusivity in water at 25 °C and the matching water viscosity
NACL_DIFFUSIVITY_REF = 1.61e-9  # m²/s
NACL_DIFFUSIVITY_T_REF = 298.15  # K
WATER_VISCOSITY_REF = 8.9e-4  # Pa·s
