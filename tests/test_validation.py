import math

import pytest

from membrane_distillation.agmd.parameters import ChannelGeometry, MembraneParameters, OperatingState
from membrane_distillation.agmd.validation import (
    InvalidPhysicalInput,
    check_channel_inputs,
    check_flux_inputs,
    check_fraction,
    check_positive,
    check_temperature,
    check_vacuum_pressure,
)

from conftest import make_water


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        check_positive("mass flow rate", 0.0)


def test_message_names_quantity():
    with pytest.raises(InvalidPhysicalInput, match="mass flow rate=-1.0") as info:
        check_positive("mass flow rate", -1.0)
    assert info.value.name == "mass flow rate"
    assert info.value.value == -1.0


@pytest.mark.parametrize("value", [math.nan, math.inf, "1.0"])
def test_non_finite_rejected(value):
    with pytest.raises(InvalidPhysicalInput):
        check_positive("x", value)


def test_fraction_bounds():
    check_fraction("porosity", 0.5)
    check_fraction("spacer porosity", 1.0, include_one=True)
    check_fraction("salinity", 0.0, include_zero=True)
    for bad in (0.0, 1.0, -0.1, 1.2):
        with pytest.raises(InvalidPhysicalInput):
            check_fraction("porosity", bad)


def test_temperature():
    check_temperature("T", -100.0)
    with pytest.raises(InvalidPhysicalInput, match="absolute zero"):
        check_temperature("T", -300.0)
    with pytest.raises(InvalidPhysicalInput, match="liquid-water"):
        check_temperature("T", 150.0, liquid=True)


def test_vacuum_pressure():
    check_vacuum_pressure("vacuum pressure", -81325.0)
    with pytest.raises(InvalidPhysicalInput):
        check_vacuum_pressure("vacuum pressure", -101325.0)


def test_channel_geometry_validate(channel):
    assert channel.validate() is channel
    with pytest.raises(InvalidPhysicalInput, match="number of channels"):
        ChannelGeometry(2e-3, 0.45, 0, 0.85).validate()
    with pytest.raises(InvalidPhysicalInput, match="spacer porosity"):
        ChannelGeometry(2e-3, 0.45, 6, 0.0).validate()


def test_membrane_validate(membrane):
    membrane.validate()
    with pytest.raises(InvalidPhysicalInput, match="tortuosity"):
        MembraneParameters(0.8, 0.9, 1e-4, 2e-7, 0.25).validate()
    with pytest.raises(InvalidPhysicalInput, match="membrane porosity"):
        MembraneParameters(1.0, 1.5, 1e-4, 2e-7, 0.25).validate()


def test_air_gap_validate(air_gap):
    air_gap.validate()


def test_operating_state_validate():
    state = OperatingState(0.0833, 0.0833, 70.0, 25.0, 0.035, 0.035, -81325.0)
    assert state.validate() is state
    with pytest.raises(InvalidPhysicalInput, match="feed mass flow rate"):
        OperatingState(0.0, 0.0833, 70.0, 25.0, 0.035, 0.035, -81325.0).validate()
    with pytest.raises(InvalidPhysicalInput, match="feed salinity"):
        OperatingState(0.0833, 0.0833, 70.0, 25.0, 1.0, 0.035, -81325.0).validate()


def test_channel_inputs(water, channel):
    check_channel_inputs(water, water, 0.0833, channel)
    with pytest.raises(InvalidPhysicalInput, match="prandtl"):
        check_channel_inputs(water, make_water(prandtl=0.0), 0.0833, channel)
    with pytest.raises(InvalidPhysicalInput, match="mass flow rate"):
        check_channel_inputs(water, water, -0.1, channel)


def test_flux_inputs(membrane):
    check_flux_inputs(membrane, 2e-3, 60.0, 60.0, 19946.0, 7000.0, -81325.0)
    with pytest.raises(InvalidPhysicalInput, match="gap temperature"):
        check_flux_inputs(membrane, 2e-3, 60.0, -280.0, 19946.0, 7000.0, -81325.0)
    with pytest.raises(InvalidPhysicalInput, match="air gap thickness"):
        check_flux_inputs(membrane, 0.0, 60.0, 60.0, 19946.0, 7000.0, -81325.0)


def test_with_interface_only_sets_interface_fields():
    state = OperatingState(0.0833, 0.0833, 70.0, 25.0, 0.035, 0.035, -81325.0)
    local = state.with_interface(feed_wall_temperature=64.0, interfacial_salinity=0.036)
    assert local.feed_wall_temperature == 64.0
    assert local.feed_temperature == 70.0
    with pytest.raises(TypeError, match="feed_temperature"):
        state.with_interface(feed_temperature=80.0)
