"""
HMM sequence simulation.

Public API:
    generate_sequence(transitions, length, rng, ...) -> tuple[HMMSequenceItem, ...]
    stationary_distribution(model) -> dict[state, float]
    state_frequencies(sequence) -> dict[state, float]
    observation_frequencies(sequence) -> dict[observation, float]
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence

import numpy as np
from numpy.typing import NDArray

from statplayground.core.exceptions import ValidationError
from statplayground.core.validation import check_int_at_least
from statplayground.hmm.design import HiddenMarkovModel
from statplayground.hmm.models import (
    EmissionModel,
    HMMSequenceItem,
    TransitionModel,
    WEATHER_EMISSIONS,
)


VALID_INITIAL = ("first", "stationary")


def generate_sequence(
    transitions: TransitionModel | HiddenMarkovModel,
    length: int,
    rng: np.random.Generator | int | None = None,
    *,
    emissions: EmissionModel = WEATHER_EMISSIONS,
    initial: str = "first",
) -> tuple[HMMSequenceItem, ...]:
    """
    Simulate a run of hidden states and their observations.

    At every step the current state emits an observation drawn from its
    emission row, then the chain moves according to the transition row.

    Args:
        transitions: TransitionModel for the weather chain, or a full
            HiddenMarkovModel (emissions is then ignored)
        length: Number of steps, >= 0. Zero gives an empty tuple.
        rng: Generator, or seed for numpy.random.default_rng. Pass a
            generator owned by the caller; one shared across threads
            needs outside synchronisation.
        emissions: Emission table used with a TransitionModel
        initial: "first" starts in the first state (Sunny for the weather
            model); "stationary" draws it from the chain's stationary
            distribution

    Returns:
        Tuple of HMMSequenceItem in time order. Each call produces a fresh
        sequence and depends only on its arguments.

    Raises:
        ValidationError: Negative length or unknown initial mode
    """
    length = check_int_at_least(length, 0, 'length')
    if initial not in VALID_INITIAL:
        raise ValidationError(
            f"initial: must be one of {VALID_INITIAL}, got {initial!r}"
        )
    if isinstance(transitions, HiddenMarkovModel):
        model = transitions
    else:
        model = HiddenMarkovModel.for_weather(transitions, emissions)

    if length == 0:
        return ()

    gen = np.random.default_rng(rng)
    trans_cum = _cumulative_rows(model.transition)
    emit_cum = _cumulative_rows(model.emission)

    if initial == "stationary":
        pi = _stationary_vector(model.transition)
        state = _draw(np.cumsum(pi), gen.random())
    else:
        state = 0

    u_emit = gen.random(length)
    u_trans = gen.random(length)

    items = []
    for t in range(length):
        obs = _draw(emit_cum[state], u_emit[t])
        items.append(
            HMMSequenceItem(
                state=model.states[state],
                observation=model.observations[obs],
            )
        )
        state = _draw(trans_cum[state], u_trans[t])

    return tuple(items)


def stationary_distribution(
    model: TransitionModel | HiddenMarkovModel,
) -> dict[Hashable, float]:
    """
    Long-run fraction of time the chain spends in each state.

    Solves pi P = pi with sum(pi) = 1. For the weather chain this is

        P(Sunny) = (1 - r) / ((1 - s) + (1 - r))
    """
    if isinstance(model, TransitionModel):
        states = model.states
        matrix = model.matrix()
    else:
        states = model.states
        matrix = model.transition
    pi = _stationary_vector(matrix)
    return {s: float(p) for s, p in zip(states, pi)}


def state_frequencies(sequence: Sequence[HMMSequenceItem]) -> dict[Hashable, float]:
    """Empirical fraction of steps spent in each hidden state."""
    return _frequencies(item.state for item in sequence)


def observation_frequencies(
    sequence: Sequence[HMMSequenceItem],
) -> dict[Hashable, float]:
    """Empirical fraction of steps with each observation."""
    return _frequencies(item.observation for item in sequence)


# --- Helpers ---

def _cumulative_rows(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    cum = np.cumsum(matrix, axis=1)
    # rows already sum to 1 within tolerance; pin the last entry exactly
    cum[:, -1] = 1.0
    return cum


def _draw(cumulative: NDArray[np.float64], u: float) -> int:
    """Index of the category a uniform draw in [0, 1) falls into."""
    idx = int(np.searchsorted(cumulative, u, side='right'))
    return min(idx, len(cumulative) - 1)


def _stationary_vector(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    k = matrix.shape[0]
    a = np.vstack([matrix.T - np.eye(k), np.ones((1, k))])
    b = np.zeros(k + 1)
    b[-1] = 1.0
    pi, *_ = np.linalg.lstsq(a, b, rcond=None)
    pi = np.clip(pi, 0.0, None)
    return pi / pi.sum()


def _frequencies(values) -> dict[Hashable, float]:
    counts = Counter(values)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {k: v / total for k, v in counts.items()}
