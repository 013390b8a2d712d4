import pytest

from membrane_distillation.agmd.config import load_design
from membrane_distillation.agmd.segment import cooling_transmittance, gap_conductivity, solve_segment
from membrane_distillation.agmd.validation import InvalidPhysicalInput


@pytest.fixture(scope="module")
def design():
    return load_design()


@pytest.fixture(scope="module")
def result(design):
    state = design.operating_state(70.0, 25.0, 0.035)
    return solve_segment(state, design.feed_channel, design.coolant_channel, design.membrane, design.air_gap)


def test_gap_conductivity():
    assert gap_conductivity(0.03, 1.0, 0.2) == pytest.approx(0.03)
    assert gap_conductivity(0.03, 0.75, 0.2) == pytest.approx(0.0725)


def test_cooling_transmittance():
    assert cooling_transmittance(2000.0, 1e-4, 0.4) == pytest.approx(1.0/(1/2000.0 + 2.5e-4))


def test_segment_converges(result):
    assert result.converged
    assert result.residual_norm < 1e-4


def test_temperature_profile_decreases(result):
    s = result.state
    assert s.feed_temperature > s.feed_wall_temperature > s.gap_wall_temperature \
        > s.film_temperature > s.cool_temperature


def test_fluxes_positive(result):
    assert result.mass_flux > 0.0
    assert result.heat_flux > result.mass_flux*2.0e6
    assert result.flux.mass_flux == result.mass_flux


def test_feed_side_energy_balance(result):
    s = result.state
    q_feed = result.feed_heat_transf_coef*(s.feed_temperature - s.feed_wall_temperature)
    assert q_feed == pytest.approx(result.heat_flux, rel=1e-4)


def test_polarization_concentrates_wall(result):
    assert result.state.interfacial_salinity > 0.035
    assert result.state.feed_membrane_pressure > result.state.film_boundary_pressure


def test_hotter_feed_more_flux(design, result):
    hot = solve_segment(design.operating_state(80.0, 25.0, 0.035), design.feed_channel,
                        design.coolant_channel, design.membrane, design.air_gap)
    assert hot.mass_flux > result.mass_flux


def test_verbose_prints(design, capsys):
    solve_segment(design.operating_state(60.0, 30.0, 0.035), design.feed_channel,
                  design.coolant_channel, design.membrane, design.air_gap, verbose=True)
    assert "segment T_f=60.00" in capsys.readouterr().out


def test_strict_rejects_invalid_state(design):
    state = design.operating_state(70.0, 25.0, 0.035, feed_mass_flow_rate=-1.0)
    with pytest.raises(InvalidPhysicalInput):
        solve_segment(state, design.feed_channel, design.coolant_channel, design.membrane,
                      design.air_gap, strict=True)


def test_result_is_slotted(result):
    assert not hasattr(result, "__dict__")
    assert result.flux.mass_flux == result.mass_flux
