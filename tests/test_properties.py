import pytest

from membrane_distillation.agmd.properties import (
    latent_heat,
    moist_air_properties,
    nacl_diffusivity,
    salt_water_density,
    salt_water_fluid,
    salt_water_properties,
    water_vapor_pressure,
)


def test_fluid_name():
    assert salt_water_fluid(0.035) == "INCOMP::MITSW[0.03500000]"


def test_salt_water_properties_physical():
    props = salt_water_properties(60.0, 0.035)
    assert 990.0 < props.density < 1030.0
    assert 3.0e-4 < props.dyn_viscosity < 7.0e-4
    assert 0.55 < props.thermal_conductivity < 0.75
    assert 3800.0 < props.specific_heat < 4300.0
    assert 1e-9 < props.mass_diffusivity < 5e-9
    assert props.prandtl == pytest.approx(props.specific_heat*props.dyn_viscosity/props.thermal_conductivity)
    assert props.schmidt == pytest.approx(props.dyn_viscosity/(props.density*props.mass_diffusivity))


def test_salt_water_is_denser_than_fresh_water():
    assert salt_water_properties(40.0, 0.07).density > salt_water_properties(40.0, 0.0).density


def test_density_at_zero_gauge_pressure():
    assert salt_water_density(25.0, 0.0) == pytest.approx(997.0, rel=5e-3)
    assert salt_water_density(25.0, 0.0) == pytest.approx(salt_water_properties(25.0, 0.0).density)


def test_diffusivity_grows_with_temperature():
    assert nacl_diffusivity(25.0, 8.9e-4) == pytest.approx(1.61e-9)
    assert nacl_diffusivity(60.0, 4.7e-4) > nacl_diffusivity(25.0, 8.9e-4)


def test_vapor_pressure():
    assert water_vapor_pressure(60.0) == pytest.approx(19946.0, rel=2e-3)
    assert water_vapor_pressure(60.0, 0.035) < water_vapor_pressure(60.0)
    assert water_vapor_pressure(60.0, 0.035) == pytest.approx(water_vapor_pressure(60.0)/(1 + 0.57357*35.0/965.0))


def test_latent_heat():
    assert latent_heat(60.0) == pytest.approx(2.358e6, rel=5e-3)
    assert latent_heat(80.0) < latent_heat(40.0)


def test_moist_air_conductivity():
    k = moist_air_properties(60.0, 101325.0).thermal_conductivity
    assert 0.015 < k < 0.035
    dry = moist_air_properties(60.0, 101325.0, relative_humidity=0.0).thermal_conductivity
    assert dry != k


def test_moist_air_saturates_below_vapor_pressure():
    # total pressure below p_sat: pores filled with vapor only
    low = moist_air_properties(60.0, 15000.0).thermal_conductivity
    lower = moist_air_properties(60.0, 12000.0).thermal_conductivity
    assert low == pytest.approx(lower)
