# Handy dimensionless groups for convective heat and mass transfer

# Reynolds number
def Re(G: float, L: float, μ: float) -> float:
  """Calculate and return the Reynolds number given
    **G** (*float*): the mass velocity (kg/m²/s),
    **L** (*float*): the characteristic length (m), and
    **μ** (*float*): the dynamic viscosity (Pa·s)"""
  return G * L / μ

# Prandtl number
def Pr(cp: float, μ: float, k: float) -> float:
  """Calculate and return the Prandtl number given
    **cp** (*float*): the specific heat (J/kg/K),
    **μ** (*float*): the dynamic viscosity (Pa·s), and
    **k** (*float*): the thermal conductivity (W/m/K)"""
  return cp * μ / k

# Schmidt number
def Sc(μ: float, ρ: float, D: float) -> float:
  """Calculate and return the Schmidt number given
    **μ** (*float*): the dynamic viscosity (Pa·s),
    **ρ** (*float*): the density (kg/m³), and
    **D** (*float*): the mass diffusivity (m²/s)"""
  return μ / (ρ * D)

# Wall-to-bulk property correction, e.g. (Pr/Pr_w)^0.25
wall_correction = lambda bulk, wall, n=0.25: (bulk / wall)**n

# Handy temperature conversions

# Kelvin to Celsius
K2C = lambda T_K: T_K - 273.15

# Celsius to Kelvin
C2K = lambda T_C: T_C + 273.15

# Salinity conversions: mass fraction <-> g/kg
frac2gkg = lambda S: 1000.0 * S
gkg2frac = lambda S_gkg: S_gkg / 1000.0
