"""
Value types for the weather Hidden Markov Model.

The hidden states are the weather, the observations are what someone did
that day. Transition and emission probabilities are held as data so other
state sets and alphabets plug into the same simulator.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from statplayground.core.exceptions import ValidationError
from statplayground.core.validation import (
    check_probability,
    check_stochastic_matrix,
)


class HiddenState(Enum):
    SUNNY = "Sunny"
    RAINY = "Rainy"


class Observation(Enum):
    WALK = "Walk"
    READ = "Read"
    CLEAN = "Clean"


@dataclass(frozen=True)
class HMMSequenceItem:
    """One simulated day: the hidden state and what was observed."""
    state: Hashable
    observation: Hashable


@dataclass(frozen=True)
class TransitionModel:
    """
    Two-state weather chain.

    Attributes:
        sunny_to_sunny: P(Sunny tomorrow | Sunny today), in (0, 1)
        rainy_to_rainy: P(Rainy tomorrow | Rainy today), in (0, 1)

    The complementary moves are 1 - sunny_to_sunny and 1 - rainy_to_rainy.
    """
    sunny_to_sunny: float
    rainy_to_rainy: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, 'sunny_to_sunny',
            check_probability(self.sunny_to_sunny, 'sunny_to_sunny'),
        )
        object.__setattr__(
            self, 'rainy_to_rainy',
            check_probability(self.rainy_to_rainy, 'rainy_to_rainy'),
        )

    @property
    def states(self) -> tuple[HiddenState, ...]:
        return (HiddenState.SUNNY, HiddenState.RAINY)

    def matrix(self) -> NDArray[np.float64]:
        """Row-stochastic transition matrix ordered (Sunny, Rainy)."""
        s = self.sunny_to_sunny
        r = self.rainy_to_rainy
        return np.array([[s, 1.0 - s], [1.0 - r, r]])


@dataclass(frozen=True, eq=False)
class EmissionModel:
    """
    Categorical observation distribution for each hidden state.

    Attributes:
        states: Hidden states, in row order
        observations: Observation alphabet, in column order
        probabilities: (len(states), len(observations)) row-stochastic table
    """
    states: tuple[Hashable, ...]
    observations: tuple[Hashable, ...]
    probabilities: NDArray[np.float64]

    def __post_init__(self) -> None:
        probs = check_stochastic_matrix(self.probabilities, 'probabilities').copy()
        if probs.shape != (len(self.states), len(self.observations)):
            raise ValidationError(
                f"probabilities: expected shape "
                f"({len(self.states)}, {len(self.observations)}), "
                f"got {probs.shape}"
            )
        if len(set(self.states)) != len(self.states):
            raise ValidationError("states: contains duplicates")
        if len(set(self.observations)) != len(self.observations):
            raise ValidationError("observations: contains duplicates")
        probs.setflags(write=False)
        object.__setattr__(self, 'states', tuple(self.states))
        object.__setattr__(self, 'observations', tuple(self.observations))
        object.__setattr__(self, 'probabilities', probs)

    @classmethod
    def from_mapping(
        cls,
        table: Mapping[Hashable, Mapping[Hashable, float]],
    ) -> EmissionModel:
        """
        Build from {state: {observation: probability}}.

        Observations missing from a state's row get probability 0. Column
        order follows first appearance across the rows.
        """
        states = tuple(table.keys())
        observations: list[Hashable] = []
        for row in table.values():
            for obs in row:
                if obs not in observations:
                    observations.append(obs)
        probs = np.array(
            [[float(table[s].get(o, 0.0)) for o in observations] for s in states]
        )
        return cls(states=states, observations=tuple(observations),
                   probabilities=probs)

    def distribution(self, state: Hashable) -> dict[Hashable, float]:
        """Observation probabilities for one state."""
        try:
            i = self.states.index(state)
        except ValueError:
            raise ValidationError(f"state: unknown state {state!r}") from None
        return {o: float(p) for o, p in zip(self.observations, self.probabilities[i])}


# Sunny days favour walking, rainy days reading and cleaning
WEATHER_EMISSIONS = EmissionModel.from_mapping({
    HiddenState.SUNNY: {
        Observation.WALK: 0.6,
        Observation.READ: 0.1,
        Observation.CLEAN: 0.3,
    },
    HiddenState.RAINY: {
        Observation.WALK: 0.1,
        Observation.READ: 0.5,
        Observation.CLEAN: 0.4,
    },
})
