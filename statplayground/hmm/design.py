"""
Design class for HMM simulation.

HiddenMarkovModel bundles everything the simulator needs: the state set,
the observation alphabet, the transition matrix and the emission table.
Immutable, validated at construction.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statplayground.core.exceptions import ValidationError
from statplayground.core.validation import check_stochastic_matrix
from statplayground.hmm.models import (
    EmissionModel,
    TransitionModel,
    WEATHER_EMISSIONS,
)


@dataclass(frozen=True, eq=False)
class HiddenMarkovModel:
    """
    Frozen N-state Hidden Markov Model.

    Attributes:
        states: Hidden states; index i labels row/column i of transition
        observations: Observation alphabet; column order of emission
        transition: (K, K) row-stochastic matrix, transition[i, j] is
            P(next = states[j] | current = states[i])
        emission: (K, M) row-stochastic matrix, emission[i, m] is
            P(observation = observations[m] | state = states[i])
    """
    states: tuple[Hashable, ...]
    observations: tuple[Hashable, ...]
    transition: NDArray[np.float64]
    emission: NDArray[np.float64]

    @classmethod
    def for_weather(
        cls,
        transitions: TransitionModel,
        emissions: EmissionModel = WEATHER_EMISSIONS,
    ) -> HiddenMarkovModel:
        """
        Create the two-state weather model.

        Args:
            transitions: Sunny/Rainy persistence probabilities
            emissions: Emission table whose states are the weather states
                (in any order)

        Returns:
            Validated HiddenMarkovModel with states ordered (Sunny, Rainy)

        Raises:
            ValidationError: If the emission table does not cover exactly
                the weather states
        """
        if not isinstance(transitions, TransitionModel):
            raise ValidationError(
                f"transitions: expected TransitionModel, got "
                f"{type(transitions).__name__}"
            )
        states = transitions.states
        if set(emissions.states) != set(states):
            raise ValidationError(
                f"emissions: states {list(emissions.states)} do not match "
                f"transition states {list(states)}"
            )
        order = [emissions.states.index(s) for s in states]
        return cls.from_tables(
            states,
            emissions.observations,
            transitions.matrix(),
            emissions.probabilities[order],
        )

    @classmethod
    def from_tables(
        cls,
        states: Sequence[Hashable],
        observations: Sequence[Hashable],
        transition: ArrayLike,
        emission: ArrayLike,
    ) -> HiddenMarkovModel:
        """
        Create a general model with validation.

        Args:
            states: K distinct hidden states
            observations: M distinct observation symbols
            transition: (K, K) row-stochastic matrix
            emission: (K, M) row-stochastic matrix

        Returns:
            Validated HiddenMarkovModel

        Raises:
            ValidationError: If shapes disagree or a table is not
                row-stochastic
        """
        states = tuple(states)
        observations = tuple(observations)
        if len(states) == 0 or len(set(states)) != len(states):
            raise ValidationError("states: must be non-empty and distinct")
        if len(observations) == 0 or len(set(observations)) != len(observations):
            raise ValidationError("observations: must be non-empty and distinct")

        trans = check_stochastic_matrix(transition, 'transition')
        emit = check_stochastic_matrix(emission, 'emission')

        k, m = len(states), len(observations)
        if trans.shape != (k, k):
            raise ValidationError(
                f"transition: expected shape ({k}, {k}), got {trans.shape}"
            )
        if emit.shape != (k, m):
            raise ValidationError(
                f"emission: expected shape ({k}, {m}), got {emit.shape}"
            )

        trans = trans.copy()
        emit = emit.copy()
        trans.setflags(write=False)
        emit.setflags(write=False)

        return cls(
            states=states,
            observations=observations,
            transition=trans,
            emission=emit,
        )

    @property
    def n_states(self) -> int:
        return len(self.states)

    @property
    def n_observations(self) -> int:
        return len(self.observations)
