"""Unit tests for expedition.models.devices module.

Tests cover:
- break_probability: weather mapping and the default for unknown weather
- SurveyDrone.survey: breakdown, sector finds, final status
- SurveyDrone.repair
"""

import pytest

from expedition.models.devices import DroneStatus, SurveyDrone, break_probability
from expedition.models.world import WeatherState
from expedition.testing import ScriptedRandom


class TestBreakProbability:
    """Tests for weather-dependent breakdown probability."""

    @pytest.mark.parametrize(
        "weather,expected",
        [
            (WeatherState.CLEAR, 0.05),
            (WeatherState.WINDY, 0.15),
            (WeatherState.SANDSTORM, 0.35),
            ("Fog", 0.10),
        ],
    )
    def test_mapping(self, weather, expected):
        assert break_probability(weather) == pytest.approx(expected)


class TestSurveyDrone:
    """Tests for the drone status machine."""

    def test_breaks_below_threshold(self, make_world, memory_sink):
        world = make_world(ScriptedRandom(floats=[0.04]))
        drone = SurveyDrone("Falcon Eye")

        drone.survey(world)

        assert drone.status == DroneStatus.BROKEN
        assert drone.is_broken
        assert world.prospect_bonus == 0
        assert "takeoff" in memory_sink.messages[0]
        assert "broke down" in memory_sink.messages[-1]

    def test_threshold_is_strict(self, make_world):
        """A draw equal to the probability does not break the drone."""
        world = make_world(ScriptedRandom(floats=[0.15, 0.9]), weather=WeatherState.WINDY)
        drone = SurveyDrone("Falcon Eye")
        drone.survey(world)
        assert drone.status == DroneStatus.IDLE

    def test_sector_find_increments_bonus(self, make_world, memory_sink):
        rng = ScriptedRandom(floats=[0.5, 0.2], ints=[3])
        world = make_world(rng)
        drone = SurveyDrone("Falcon Eye")

        drone.survey(world)

        assert drone.status == DroneStatus.IDLE
        assert world.prospect_bonus == 1
        assert memory_sink.messages[-1].endswith("found a promising sector #3.")
        assert rng.remaining_floats == 0
        assert rng.remaining_ints == 0

    def test_no_find_still_idle(self, make_world):
        world = make_world(ScriptedRandom(floats=[0.5, 0.5]))
        drone = SurveyDrone("Falcon Eye")
        drone.survey(world)
        assert drone.status == DroneStatus.IDLE
        assert world.prospect_bonus == 0

    @pytest.mark.parametrize(
        "floats,ints",
        [([0.01], []), ([0.9, 0.1], [1]), ([0.9, 0.9], [])],
    )
    def test_never_left_surveying(self, make_world, floats, ints):
        """A completed survey always ends Idle or Broken."""
        world = make_world(ScriptedRandom(floats=floats, ints=ints), weather=WeatherState.SANDSTORM)
        drone = SurveyDrone("Falcon Eye")
        drone.survey(world)
        assert drone.status in (DroneStatus.IDLE, DroneStatus.BROKEN)

    def test_broken_drone_cannot_launch(self, make_world, memory_sink):
        rng = ScriptedRandom(floats=[0.01])
        world = make_world(rng)
        drone = SurveyDrone("Falcon Eye")
        drone.survey(world)
        memory_sink.clear()

        drone.survey(world)

        assert drone.is_broken
        assert rng.float_draws == 1
        assert memory_sink.messages == [f"{drone}: malfunctioning, cannot launch."]

    def test_repair_restores_idle(self, make_world):
        world = make_world(ScriptedRandom(floats=[0.01]))
        drone = SurveyDrone("Falcon Eye")
        drone.survey(world)
        drone.repair()
        assert drone.status == DroneStatus.IDLE
