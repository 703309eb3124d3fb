"""
Tests for the HMM value types and HiddenMarkovModel construction.
"""

import numpy as np
import pytest

from statplayground.core import ValidationError
from statplayground.hmm import (
    EmissionModel,
    HiddenMarkovModel,
    HiddenState,
    Observation,
    TransitionModel,
    WEATHER_EMISSIONS,
)


class TestTransitionModel:

    def test_matrix(self):
        tm = TransitionModel(sunny_to_sunny=0.8, rainy_to_rainy=0.3)
        np.testing.assert_allclose(tm.matrix(), [[0.8, 0.2], [0.7, 0.3]])

    def test_states_order(self):
        tm = TransitionModel(0.5, 0.5)
        assert tm.states == (HiddenState.SUNNY, HiddenState.RAINY)

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.2, 1.5, float("nan")])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError, match="sunny_to_sunny"):
            TransitionModel(sunny_to_sunny=value, rainy_to_rainy=0.5)

    def test_rejects_non_number(self):
        with pytest.raises(ValidationError, match="rainy_to_rainy"):
            TransitionModel(sunny_to_sunny=0.5, rainy_to_rainy="0.5")

    def test_frozen(self):
        tm = TransitionModel(0.5, 0.5)
        with pytest.raises(AttributeError):
            tm.sunny_to_sunny = 0.9


class TestEmissionModel:

    def test_weather_table(self):
        sunny = WEATHER_EMISSIONS.distribution(HiddenState.SUNNY)
        rainy = WEATHER_EMISSIONS.distribution(HiddenState.RAINY)
        assert sunny == {
            Observation.WALK: 0.6, Observation.READ: 0.1, Observation.CLEAN: 0.3,
        }
        assert rainy == {
            Observation.WALK: 0.1, Observation.READ: 0.5, Observation.CLEAN: 0.4,
        }

    def test_from_mapping_fills_missing_with_zero(self):
        em = EmissionModel.from_mapping({
            "a": {"x": 1.0},
            "b": {"x": 0.25, "y": 0.75},
        })
        assert em.observations == ("x", "y")
        np.testing.assert_allclose(em.probabilities, [[1.0, 0.0], [0.25, 0.75]])

    def test_row_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="do not sum to 1"):
            EmissionModel.from_mapping({"a": {"x": 0.5, "y": 0.4}})

    def test_negative_probability(self):
        with pytest.raises(ValidationError, match="negative"):
            EmissionModel(("a",), ("x", "y"), np.array([[1.5, -0.5]]))

    def test_shape_mismatch(self):
        with pytest.raises(ValidationError, match="shape"):
            EmissionModel(("a", "b"), ("x", "y"), np.array([[0.5, 0.5]]))

    def test_duplicate_states(self):
        with pytest.raises(ValidationError, match="duplicates"):
            EmissionModel(("a", "a"), ("x",), np.array([[1.0], [1.0]]))

    def test_unknown_state(self):
        with pytest.raises(ValidationError, match="unknown state"):
            WEATHER_EMISSIONS.distribution("Foggy")

    def test_read_only(self):
        with pytest.raises(ValueError):
            WEATHER_EMISSIONS.probabilities[0, 0] = 1.0

    def test_copies_input(self):
        probs = np.array([[0.5, 0.5]])
        em = EmissionModel(("a",), ("x", "y"), probs)
        probs[0, 0] = 0.9
        assert em.probabilities[0, 0] == 0.5


class TestHiddenMarkovModel:

    def test_for_weather(self):
        model = HiddenMarkovModel.for_weather(TransitionModel(0.9, 0.6))
        assert model.states == (HiddenState.SUNNY, HiddenState.RAINY)
        assert model.n_states == 2
        assert model.n_observations == 3
        np.testing.assert_allclose(model.transition, [[0.9, 0.1], [0.4, 0.6]])
        np.testing.assert_allclose(model.emission, WEATHER_EMISSIONS.probabilities)

    def test_for_weather_reorders_emission_rows(self):
        reversed_table = EmissionModel.from_mapping({
            HiddenState.RAINY: {Observation.WALK: 0.1, Observation.READ: 0.5,
                                Observation.CLEAN: 0.4},
            HiddenState.SUNNY: {Observation.WALK: 0.6, Observation.READ: 0.1,
                                Observation.CLEAN: 0.3},
        })
        model = HiddenMarkovModel.for_weather(TransitionModel(0.5, 0.5),
                                              reversed_table)
        np.testing.assert_allclose(model.emission, WEATHER_EMISSIONS.probabilities)

    def test_for_weather_rejects_foreign_states(self):
        table = EmissionModel.from_mapping({"a": {"x": 1.0}, "b": {"x": 1.0}})
        with pytest.raises(ValidationError, match="do not match"):
            HiddenMarkovModel.for_weather(TransitionModel(0.5, 0.5), table)

    def test_for_weather_rejects_raw_matrix(self):
        with pytest.raises(ValidationError, match="TransitionModel"):
            HiddenMarkovModel.for_weather([[0.5, 0.5], [0.5, 0.5]])

    def test_from_tables_three_states(self):
        model = HiddenMarkovModel.from_tables(
            ["a", "b", "c"], ["x", "y"],
            [[0.5, 0.25, 0.25], [0.0, 1.0, 0.0], [0.2, 0.3, 0.5]],
            [[1.0, 0.0], [0.5, 0.5], [0.0, 1.0]],
        )
        assert model.n_states == 3
        assert model.states == ("a", "b", "c")

    def test_from_tables_transition_shape(self):
        with pytest.raises(ValidationError, match="transition: expected shape"):
            HiddenMarkovModel.from_tables(
                ["a", "b"], ["x"], [[1.0]], [[1.0], [1.0]],
            )

    def test_from_tables_emission_shape(self):
        with pytest.raises(ValidationError, match="emission: expected shape"):
            HiddenMarkovModel.from_tables(
                ["a"], ["x", "y"], [[1.0]], [[1.0]],
            )

    def test_from_tables_not_stochastic(self):
        with pytest.raises(ValidationError, match="transition"):
            HiddenMarkovModel.from_tables(
                ["a", "b"], ["x"], [[0.5, 0.4], [0.5, 0.5]], [[1.0], [1.0]],
            )

    def test_from_tables_empty_states(self):
        with pytest.raises(ValidationError, match="states"):
            HiddenMarkovModel.from_tables([], ["x"], [[1.0]], [[1.0]])

    def test_tables_are_read_only(self):
        model = HiddenMarkovModel.for_weather(TransitionModel(0.5, 0.5))
        with pytest.raises(ValueError):
            model.transition[0, 0] = 1.0
