import pytest

from membrane_distillation.agmd.polarization import (
    molarity_to_salinity,
    polarization_factor,
    salinity_to_molarity,
    salt_water_concentration,
)


def constant_density(temperature, pressure):
    return 985.0


def test_molarity_of_seawater():
    # 35 g/kg NaCl is roughly 0.6 mol/L
    assert salinity_to_molarity(0.035, 1025.0) == pytest.approx(0.6, rel=0.1)


@pytest.mark.parametrize("salinity", [0.0, 0.01, 0.035, 0.1, 0.2])
def test_molarity_conversion_inverts(salinity):
    molarity = salinity_to_molarity(salinity, 985.0)
    assert molarity_to_salinity(molarity, 985.0) == pytest.approx(salinity, abs=1e-14)


def test_zero_flux_is_identity():
    S = salt_water_concentration(5e-5, 60.0, 0.035, 0.0, density_func=constant_density)
    assert S == pytest.approx(0.035, rel=1e-12)


def test_flux_toward_membrane_concentrates():
    S_plus = salt_water_concentration(5e-5, 60.0, 0.035, 2e-3, density_func=constant_density)
    S_minus = salt_water_concentration(5e-5, 60.0, 0.035, -2e-3, density_func=constant_density)
    assert S_plus > 0.035 > S_minus


def test_concentration_uses_film_theory_factor():
    k_m, J = 5e-5, 2e-3
    S = salt_water_concentration(k_m, 60.0, 0.035, J, density_func=constant_density)
    ratio = salinity_to_molarity(S, 985.0)/salinity_to_molarity(0.035, 985.0)
    assert ratio == pytest.approx(polarization_factor(J, 985.0, k_m))


def test_density_evaluated_at_zero_pressure():
    calls = []

    def density(temperature, pressure):
        calls.append((temperature, pressure))
        return 990.0

    salt_water_concentration(5e-5, 45.0, 0.035, 1e-3, density_func=density)
    assert calls == [(45.0, 0.0)]


def test_default_density_zero_flux_identity():
    S = salt_water_concentration(5e-5, 60.0, 0.035, 0.0)
    assert S == pytest.approx(0.035, rel=1e-12)


def test_seawater_molarity_round_trip():
    # 1 mol/L of NaCl in 985 kg/m³ water is about 57.5 g/kg
    molarity = salinity_to_molarity(0.035, 985.0)
    assert molarity_to_salinity(molarity, 985.0) == pytest.approx(0.035, rel=1e-12)
    assert molarity_to_salinity(1.0, 985.0) == pytest.approx(0.0575, rel=0.005)
