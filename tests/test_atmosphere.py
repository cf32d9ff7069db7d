import numpy as np
import pytest

from reference_atmos.physics.earth_atmosphere import (
    BOUNDARIES,
    ISA_BASE_PRESSURES,
    ISA_BASE_TEMPERATURES,
    LAYERS,
    OutOfRangeError,
    PhysicalState,
    TOP_ALTITUDE,
    evaluate_earth,
    find_layer,
    layer_state,
    sample_profile,
)


def test_sea_level_reference():
    state = evaluate_earth(0.0)
    assert state.temperature == pytest.approx(288.15, rel=1e-6)
    assert state.pressure == pytest.approx(101325.0, rel=1e-6)
    assert state.density == pytest.approx(1.225, rel=1e-4)
    assert state.speed_of_sound == pytest.approx(340.294, rel=1e-4)
    assert state.kinematic_viscosity == pytest.approx(1.4607e-5, rel=1e-3)


def test_tropopause_values():
    state = evaluate_earth(11_000.0)
    assert state.temperature == pytest.approx(216.65, rel=1e-9)
    assert state.pressure == pytest.approx(22632.0, rel=1e-4)


def test_as_tuple_order():
    state = evaluate_earth(5000.0)
    assert isinstance(state, PhysicalState)
    assert state.as_tuple() == (
        state.temperature,
        state.pressure,
        state.density,
        state.kinematic_viscosity,
        state.speed_of_sound,
    )


def test_outputs_finite_and_positive():
    for h in np.linspace(0.0, TOP_ALTITUDE, 400):
        values = np.array(evaluate_earth(float(h)).as_tuple())
        assert np.all(np.isfinite(values))
        assert np.all(values > 0.0)


def test_pressure_strictly_decreasing():
    altitudes = np.linspace(0.0, TOP_ALTITUDE, 500)
    pressures = sample_profile(altitudes)["p"]
    assert np.all(np.diff(pressures) < 0.0)


def test_density_decreases_with_altitude():
    altitudes = np.linspace(0, 80_000, 9)
    densities = [evaluate_earth(h).density for h in altitudes]
    assert all(densities[i] > densities[i + 1] for i in range(len(densities) - 1))


def test_layer_continuity():
    for lower, upper in zip(LAYERS[:-1], LAYERS[1:]):
        boundary = lower.h_top
        assert upper.h_base == boundary
        t_lower, p_lower = layer_state(lower, boundary)
        t_upper, p_upper = layer_state(upper, boundary)
        assert t_lower == pytest.approx(t_upper, rel=1e-9)
        assert p_lower == pytest.approx(p_upper, rel=1e-9)


def test_layer_continuity_neighbouring_points():
    for h in BOUNDARIES[1:-1]:
        rho_lower = evaluate_earth(h - 1.0).density
        rho_upper = evaluate_earth(h + 1.0).density
        assert np.isclose(rho_lower, rho_upper, rtol=1e-3)


def test_layers_match_reference_table():
    for layer, t_ref, p_ref in zip(LAYERS, ISA_BASE_TEMPERATURES, ISA_BASE_PRESSURES):
        assert layer.t_base == pytest.approx(t_ref, rel=1e-9)
        assert layer.p_base == pytest.approx(p_ref, rel=1e-3)
    t_top, p_top = layer_state(LAYERS[-1], TOP_ALTITUDE)
    assert t_top == pytest.approx(ISA_BASE_TEMPERATURES[-1], rel=1e-9)
    assert p_top == pytest.approx(ISA_BASE_PRESSURES[-1], rel=1e-3)


def test_isothermal_layers():
    assert [layer.isothermal for layer in LAYERS] == [False, True, False, False, True, False, False]
    assert evaluate_earth(15_000.0).temperature == pytest.approx(216.65)
    assert evaluate_earth(49_000.0).temperature == pytest.approx(270.65)


def test_layer_selection_at_boundaries():
    assert find_layer(11_000.0) is LAYERS[0]
    assert find_layer(11_000.5) is LAYERS[1]
    assert find_layer(TOP_ALTITUDE) is LAYERS[-1]


def test_negative_altitude_uses_troposphere():
    assert find_layer(-500.0) is LAYERS[0]
    state = evaluate_earth(-500.0)
    assert state.temperature == pytest.approx(288.15 + 0.0065 * 500.0)
    assert state.pressure > 101325.0


def test_above_top_raises():
    with pytest.raises(OutOfRangeError) as excinfo:
        evaluate_earth(TOP_ALTITUDE + 1.0)
    assert excinfo.value.altitude == TOP_ALTITUDE + 1.0
    assert excinfo.value.top == TOP_ALTITUDE
    assert isinstance(excinfo.value, ValueError)


def test_above_top_extrapolates_when_requested():
    h = 90_000.0
    state = evaluate_earth(h, extrapolate=True)
    top = LAYERS[-1]
    assert state.temperature == pytest.approx(top.t_base + top.lapse * (h - top.h_base))
    assert state.pressure < evaluate_earth(TOP_ALTITUDE).pressure


def test_sample_profile_keeps_shape():
    altitudes = np.array([[0.0, 1000.0], [20_000.0, 50_000.0]])
    props = sample_profile(altitudes)
    assert set(props) == {"T", "p", "rho", "nu", "a"}
    assert props["T"].shape == (2, 2)
    assert props["p"][1, 0] == pytest.approx(evaluate_earth(20_000.0).pressure)


def test_extrapolation_past_zero_temperature_gives_nan():
    state = evaluate_earth(200_000.0, extrapolate=True)
    assert state.temperature < 0.0
    assert np.isnan(state.pressure)
    assert np.isnan(state.density)
    assert np.isnan(state.speed_of_sound)


def test_sample_profile_extrapolated_far_above_top():
    props = sample_profile(np.array([80_000.0, 200_000.0]), extrapolate=True)
    assert np.isfinite(props["p"][0])
    assert np.isnan(props["p"][1])
