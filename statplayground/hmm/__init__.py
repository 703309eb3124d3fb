"""
Hidden Markov Model simulation.

Public API:
    generate_sequence(transitions, length, rng, ...) -> tuple[HMMSequenceItem, ...]
    stationary_distribution(model) -> dict
    state_frequencies(sequence) -> dict
    observation_frequencies(sequence) -> dict
"""

from statplayground.hmm.models import (
    EmissionModel,
    HiddenState,
    HMMSequenceItem,
    Observation,
    TransitionModel,
    WEATHER_EMISSIONS,
)
from statplayground.hmm.design import HiddenMarkovModel
from statplayground.hmm.simulator import (
    generate_sequence,
    observation_frequencies,
    state_frequencies,
    stationary_distribution,
)

__all__ = [
    "EmissionModel",
    "HiddenState",
    "HMMSequenceItem",
    "Observation",
    "TransitionModel",
    "WEATHER_EMISSIONS",
    "HiddenMarkovModel",
    "generate_sequence",
    "observation_frequencies",
    "state_frequencies",
    "stationary_distribution",
]
