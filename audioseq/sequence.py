#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Sequential modeling
===================

Dynamic time warping
--------------------
.. autosummary::
    :toctree: generated/

    distance
    dtw
    dtw_banded
    dtw_normalized

Hidden Markov models
--------------------
.. autosummary::
    :toctree: generated/

    HiddenMarkovModel
    log_sum

Model construction
------------------
.. autosummary::
    :toctree: generated/

    transition_uniform
    transition_loop
    transition_cycle
    emission_gaussian
"""
from __future__ import annotations

import numpy as np
from scipy.spatial.distance import cdist
from numba import jit

from .util import valid_observations
from .util.exceptions import ParameterError
from ._typing import _Metric, _FeatureSequence
from typing import Any, Iterable, Optional, Tuple, Union

__all__ = [
    "distance",
    "dtw",
    "dtw_banded",
    "dtw_normalized",
    "log_sum",
    "HiddenMarkovModel",
    "transition_uniform",
    "transition_loop",
    "transition_cycle",
    "emission_gaussian",
]

# Frame distance metrics, mapped to their scipy.spatial.distance names
_METRICS = {"euclidean": "euclidean", "manhattan": "cityblock"}


def _check_metric(metric: str) -> str:
    if metric not in _METRICS:
        raise ParameterError(
            f"Unsupported metric={metric!r}, must be one of {sorted(_METRICS)}"
        )
    return _METRICS[metric]


def distance(a: np.ndarray, b: np.ndarray, metric: _Metric = "euclidean") -> float:
    """Distance between two feature vectors.

    - ``'euclidean'``: ``sqrt(sum((a - b) ** 2))``
    - ``'manhattan'``: ``sum(abs(a - b))``

    Parameters
    ----------
    a, b : np.ndarray [shape=(d,)]
        feature vectors
    metric : str
        ``'euclidean'`` or ``'manhattan'``

    Returns
    -------
    dist : float >= 0
        The distance between ``a`` and ``b``,
        or ``+inf`` if they have different dimensionality.

    Raises
    ------
    ParameterError
        If ``metric`` is not supported, or the inputs are not vectors.

    Examples
    --------
    >>> a = np.array([0.0, 0.0])
    >>> b = np.array([3.0, 4.0])
    >>> audioseq.sequence.distance(a, b)
    5.0
    >>> audioseq.sequence.distance(a, b, metric='manhattan')
    7.0
    """
    _check_metric(metric)

    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    if a.ndim != 1 or b.ndim != 1:
        raise ParameterError(
            f"Feature vectors must be one-dimensional, given a.shape={a.shape}, b.shape={b.shape}"
        )

    if a.shape != b.shape:
        return np.inf

    if metric == "manhattan":
        return float(np.sum(np.abs(a - b)))

    return float(np.sqrt(np.sum((a - b) ** 2)))


def _as_sequence(X: _FeatureSequence, name: str) -> np.ndarray:
    X = np.asarray(X, dtype=float)

    if X.size == 0 and X.ndim < 2:
        # An empty list or 1-d array carries no dimensionality
        return X.reshape((0, 0))

    if X.ndim != 2:
        raise ParameterError(
            f"{name} must be a 2-dimensional (n_steps, n_features) array, given {name}.shape={X.shape}"
        )

    return X


def _cost_matrix(X: np.ndarray, Y: np.ndarray, metric: str) -> np.ndarray:
    if X.shape[1] == 0:
        return np.zeros((X.shape[0], Y.shape[0]))

    C: np.ndarray = cdist(X, Y, metric=_METRICS[metric])
    return C


def _dtw(
    X: _FeatureSequence, Y: _FeatureSequence, metric: str, window_size: Optional[int]
) -> Tuple[float, np.ndarray]:
    _check_metric(metric)

    X = _as_sequence(X, "X")
    Y = _as_sequence(Y, "Y")

    n, m = X.shape[0], Y.shape[0]
    empty_path = np.zeros((0, 2), dtype=int)

    if n == 0 or m == 0 or X.shape[1] != Y.shape[1]:
        return np.inf, empty_path

    if window_size is None:
        window_size = max(n, m)

    C = _cost_matrix(X, Y, metric)

    # Accumulated cost, with an infinite border row and column
    D = np.full((n + 1, m + 1), np.inf)
    D[0, 0] = 0.0

    # -1 marks cells that were never computed
    D_steps = np.full((n + 1, m + 1), -1, dtype=np.int64)

    _dtw_calc_accu_cost(C, D, D_steps, window_size)

    if not np.isfinite(D[n, m]):
        return np.inf, empty_path

    wp = _dtw_backtracking(D_steps)
    wp = np.asarray(wp[::-1], dtype=int).reshape((-1, 2))

    return float(D[n, m]), wp


def dtw(
    X: _FeatureSequence, Y: _FeatureSequence, *, metric: _Metric = "euclidean"
) -> Tuple[float, np.ndarray]:
    """Dynamic time warping (DTW).

    This function computes the minimal cumulative frame distance over all
    monotone alignments of two feature sequences, along with the
    alignment path that achieves it.

    The accumulated cost ``D`` has shape ``(n + 1, m + 1)``, with
    ``D[0, 0] = 0`` and all other border cells ``+inf``.  For
    ``i`` in ``[1, n]`` and ``j`` in ``[1, m]``::

        D[i, j] = dist(X[i-1], Y[j-1]) + min(D[i-1, j-1], D[i, j-1], D[i-1, j])

    When several predecessors share the minimum, the diagonal step is
    preferred, then the horizontal step (``j - 1``),
    then the vertical step (``i - 1``).
    This order determines which of several optimal paths is returned.

    Parameters
    ----------
    X : np.ndarray [shape=(n, d)]
        feature sequence, one row per time step
    Y : np.ndarray [shape=(m, d)]
        feature sequence, one row per time step
    metric : str
        frame distance, ``'euclidean'`` or ``'manhattan'``.
        See `distance`.

    Returns
    -------
    dist : float
        The total alignment cost ``D[n, m]``.
        ``+inf`` if either sequence is empty, or if the sequences
        have different feature dimensions.
    wp : np.ndarray [shape=(L, 2), dtype=int]
        Warping path in chronological order:
        each row ``(i, j)`` pairs ``X[i]`` with ``Y[j]``.
        Empty if ``dist`` is infinite.

    Raises
    ------
    ParameterError
        If ``metric`` is not supported, or the inputs are not 2-dimensional.

    See Also
    --------
    dtw_banded
    dtw_normalized
    scipy.spatial.distance.cdist

    Examples
    --------
    >>> X = np.array([[0.0], [1.0], [2.0]])
    >>> dist, wp = audioseq.sequence.dtw(X, X)
    >>> dist
    0.0
    >>> wp
    array([[0, 0],
           [1, 1],
           [2, 2]])

    A time-stretched copy aligns at zero cost

    >>> Y = np.array([[0.0], [0.0], [1.0], [2.0], [2.0]])
    >>> dist, wp = audioseq.sequence.dtw(X, Y)
    >>> dist
    0.0
    >>> wp
    array([[0, 0],
           [0, 1],
           [1, 2],
           [2, 3],
           [2, 4]])
    """
    return _dtw(X, Y, metric, None)


def dtw_banded(
    X: _FeatureSequence, Y: _FeatureSequence, *, window_size: int
) -> Tuple[float, np.ndarray]:
    """Dynamic time warping restricted to a Sakoe-Chiba band.

    The recurrence and tie-breaking of `dtw` are applied only to cells
    ``(i, j)`` with ``max(1, i - window_size) <= j <= min(m, i + window_size)``.
    Cells outside the band are unreachable.
    Frame distances are Euclidean.

    If ``window_size >= max(n, m)``, the band covers the full grid and
    the result equals that of `dtw`.

    Parameters
    ----------
    X : np.ndarray [shape=(n, d)]
        feature sequence, one row per time step
    Y : np.ndarray [shape=(m, d)]
        feature sequence, one row per time step
    window_size : int >= 0
        band radius, in time steps

    Returns
    -------
    dist : float
        The total alignment cost.
        ``+inf`` if either sequence is empty, the feature dimensions differ,
        or the band does not connect ``(0, 0)`` to ``(n - 1, m - 1)``
        (e.g., ``window_size < |n - m|``).
    wp : np.ndarray [shape=(L, 2), dtype=int]
        Warping path in chronological order.  Empty if ``dist`` is infinite.

    Raises
    ------
    ParameterError
        If ``window_size`` is not a non-negative integer,
        or the inputs are not 2-dimensional.

    See Also
    --------
    dtw

    Examples
    --------
    >>> X = np.array([[0.0], [1.0], [2.0], [3.0]])
    >>> Y = np.array([[0.0], [2.0], [3.0], [3.0]])
    >>> audioseq.sequence.dtw_banded(X, Y, window_size=1)
    (1.0, array([[0, 0],
           [1, 0],
           [2, 1],
           [3, 2],
           [3, 3]]))
    """
    if not isinstance(window_size, (int, np.integer)) or window_size < 0:
        raise ParameterError(
            f"window_size={window_size} must be a non-negative integer"
        )

    return _dtw(X, Y, "euclidean", int(window_size))


def dtw_normalized(
    X: _FeatureSequence, Y: _FeatureSequence, *, metric: _Metric = "euclidean"
) -> float:
    """DTW distance divided by the length of the warping path.

    Parameters
    ----------
    X : np.ndarray [shape=(n, d)]
        feature sequence, one row per time step
    Y : np.ndarray [shape=(m, d)]
        feature sequence, one row per time step
    metric : str
        frame distance, ``'euclidean'`` or ``'manhattan'``

    Returns
    -------
    dist : float
        ``dist / len(wp)`` for ``dist, wp = dtw(X, Y)``.
        If the path is empty, ``dist`` is returned unmodified.

    See Also
    --------
    dtw

    Examples
    --------
    >>> X = np.array([[0.0], [1.0]])
    >>> Y = np.array([[1.0], [2.0]])
    >>> audioseq.sequence.dtw_normalized(X, Y)
    1.0
    """
    dist, wp = dtw(X, Y, metric=metric)

    if len(wp) > 0:
        return dist / len(wp)

    return dist


@jit(nopython=True, cache=True)
def _dtw_calc_accu_cost(C, D, D_steps, window_size):  # pragma: no cover
    """Calculate the accumulated cost matrix D in-place.

    Parameters
    ----------
    C : np.ndarray [shape=(n, m)]
        pre-computed cost matrix
    D : np.ndarray [shape=(n + 1, m + 1)]
        accumulated cost matrix, initialized to ``+inf`` except ``D[0, 0]``
    D_steps : np.ndarray [shape=(n + 1, m + 1)]
        steps used to reach each cell:
        0 (diagonal), 1 (horizontal), 2 (vertical), or -1 (not computed)
    window_size : int
        band radius
    """
    n, m = C.shape

    for i in range(1, n + 1):
        for j in range(max(1, i - window_size), min(m, i + window_size) + 1):
            match = D[i - 1, j - 1]
            insertion = D[i, j - 1]
            deletion = D[i - 1, j]

            if match <= insertion and match <= deletion:
                D[i, j] = C[i - 1, j - 1] + match
                D_steps[i, j] = 0
            elif insertion <= deletion:
                D[i, j] = C[i - 1, j - 1] + insertion
                D_steps[i, j] = 1
            else:
                D[i, j] = C[i - 1, j - 1] + deletion
                D_steps[i, j] = 2


@jit(nopython=True, cache=True)
def _dtw_backtracking(D_steps):  # pragma: no cover
    """Backtrack the optimal warping path from the bottom-right cell.

    Returns
    -------
    wp : list of (int, int)
        Warping path in reverse chronological order
    """
    wp = []
    i = D_steps.shape[0] - 1
    j = D_steps.shape[1] - 1

    while i > 0 and j > 0:
        step = D_steps[i, j]
        if step < 0:
            break

        wp.append((i - 1, j - 1))

        if step == 0:
            i -= 1
            j -= 1
        elif step == 1:
            j -= 1
        else:
            i -= 1

    return wp


@jit(nopython=True, cache=True)
def _log_sum(log_a, log_b):  # pragma: no cover
    if log_a == -np.inf:
        return log_b
    if log_b == -np.inf:
        return log_a

    if log_a > log_b:
        return log_a + np.log1p(np.exp(log_b - log_a))
    return log_b + np.log1p(np.exp(log_a - log_b))


def log_sum(log_a: float, log_b: float) -> float:
    """Numerically stable ``log(exp(log_a) + exp(log_b))``.

    ``-inf`` acts as the identity: ``log_sum(-inf, x) == x``.

    Parameters
    ----------
    log_a, log_b : float
        log-probabilities

    Returns
    -------
    log_ab : float

    Examples
    --------
    >>> audioseq.sequence.log_sum(np.log(0.25), np.log(0.5))
    -0.2876820724517809
    >>> audioseq.sequence.log_sum(-np.inf, -np.inf)
    -inf
    """
    return float(_log_sum(float(log_a), float(log_b)))


@jit(nopython=True, cache=True)
def _viterbi(log_prob, log_trans, log_p_init, state, value, ptr):  # pragma: no cover
    """Core Viterbi algorithm.

    This is intended for internal use only.

    Parameters
    ----------
    log_prob : np.ndarray [shape=(T, m)]
        ``log_prob[t, s]`` is the conditional log-likelihood
        ``log P[X = X(t) | State(t) = s]``
    log_trans : np.ndarray [shape=(m, m)]
        The log transition matrix
        ``log_trans[i, j] = log P[State(t+1) = j | State(t) = i]``
    log_p_init : np.ndarray [shape=(m,)]
        log of the initial state distribution
    state : np.ndarray [shape=(T,), dtype=int]
        Pre-allocated state index array
    value : np.ndarray [shape=(T, m)] float
        Pre-allocated value array
    ptr : np.ndarray [shape=(T, m), dtype=int]
        Pre-allocated pointer array

    Returns
    -------
    None
        All computations are performed in-place on ``state, value, ptr``.
    """
    n_steps, n_states = log_prob.shape

    # factor in initial state distribution
    value[0] = log_p_init + log_prob[0]

    for t in range(1, n_steps):
        # Tout[j, k] = V[t-1, k] + log A[k, j]
        trans_out = value[t - 1] + log_trans.T

        # argmax keeps the first of several equal maxima
        for j in range(n_states):
            ptr[t, j] = np.argmax(trans_out[j])
            value[t, j] = trans_out[j, ptr[t, j]] + log_prob[t, j]

    # Now roll backward
    state[-1] = np.argmax(value[-1])

    for t in range(n_steps - 2, -1, -1):
        state[t] = ptr[t + 1, state[t + 1]]


@jit(nopython=True, cache=True)
def _forward(log_prob, log_trans, log_p_init, alpha):  # pragma: no cover
    """Forward recursion in the log domain, filling ``alpha`` in-place."""
    n_steps, n_states = log_prob.shape

    alpha[0] = log_p_init + log_prob[0]

    for t in range(1, n_steps):
        for j in range(n_states):
            acc = -np.inf
            for i in range(n_states):
                acc = _log_sum(acc, alpha[t - 1, i] + log_trans[i, j])
            alpha[t, j] = acc + log_prob[t, j]


@jit(nopython=True, cache=True)
def _backward(log_prob, log_trans, beta):  # pragma: no cover
    """Backward recursion in the log domain, filling ``beta`` in-place."""
    n_steps, n_states = log_prob.shape

    beta[-1] = 0.0

    for t in range(n_steps - 2, -1, -1):
        for i in range(n_states):
            acc = -np.inf
            for j in range(n_states):
                acc = _log_sum(
                    acc, log_trans[i, j] + log_prob[t + 1, j] + beta[t + 1, j]
                )
            beta[t, i] = acc


class HiddenMarkovModel:
    """A discrete hidden Markov model with fixed parameters.

    The model is immutable once constructed: its parameter arrays are
    read-only copies, so a single instance may be shared across threads.
    Every decoding call allocates its own lattices.

    Parameters are used as given: rows of ``transition`` and ``emission``
    and the entries of ``p_init`` are expected to sum to 1, but this is
    not checked, and no normalization is applied.  Zero probabilities
    propagate as ``-inf`` log-probabilities.

    Parameters
    ----------
    transition : np.ndarray [shape=(n_states, n_states), non-negative]
        ``transition[i, j]`` is the probability of a transition from i->j.
    emission : np.ndarray [shape=(n_states, n_symbols), non-negative]
        ``emission[i, o]`` is the probability of state ``i`` emitting
        symbol ``o``.
    p_init : np.ndarray [shape=(n_states,)]
        Optional: initial state distribution.
        If not provided, a uniform distribution is assumed.

    Attributes
    ----------
    transition, emission, p_init : np.ndarray
        read-only model parameters
    n_states : int
        number of hidden states
    n_symbols : int
        size of the observation vocabulary.  Symbols outside
        ``[0, n_symbols)`` are impossible under the model.

    Raises
    ------
    ParameterError
        If the parameter shapes are inconsistent.

    See Also
    --------
    transition_uniform
    transition_loop
    transition_cycle
    emission_gaussian

    Examples
    --------
    Example from https://en.wikipedia.org/wiki/Viterbi_algorithm#Example

    In this example, we have two states ``healthy`` and ``fever``, with
    initial probabilities 60% and 40%.

    We have three observation possibilities: ``normal``, ``cold``, and
    ``dizzy``, whose probabilities given each state are:

    ``healthy => {normal: 50%, cold: 40%, dizzy: 10%}`` and
    ``fever => {normal: 10%, cold: 30%, dizzy: 60%}``

    Finally, we have transition probabilities:

    ``healthy => healthy (70%)`` and
    ``fever => fever (60%)``.

    Over three days, we observe the sequence ``[normal, cold, dizzy]``,
    and wish to know the maximum likelihood assignment of states for the
    corresponding days, which we compute with the Viterbi algorithm below.

    >>> p_init = np.array([0.6, 0.4])
    >>> p_emit = np.array([[0.5, 0.4, 0.1],
    ...                    [0.1, 0.3, 0.6]])
    >>> p_trans = np.array([[0.7, 0.3], [0.4, 0.6]])
    >>> hmm = audioseq.sequence.HiddenMarkovModel(p_trans, p_emit, p_init)
    >>> path, logp, step_logp = hmm.viterbi([0, 1, 2], return_logp=True)
    >>> print(logp, path)
    -4.19173690823075 [0 0 1]
    """

    def __init__(
        self,
        transition: np.ndarray,
        emission: np.ndarray,
        p_init: Optional[np.ndarray] = None,
    ):
        transition = np.array(transition, dtype=float)
        emission = np.array(emission, dtype=float)

        if transition.ndim != 2 or transition.shape[0] != transition.shape[1]:
            raise ParameterError(
                f"transition.shape={transition.shape}, must be (n_states, n_states)"
            )

        n_states = transition.shape[0]

        if emission.ndim != 2 or emission.shape[0] != n_states:
            raise ParameterError(
                f"emission.shape={emission.shape}, must be (n_states={n_states}, n_symbols)"
            )

        if p_init is None:
            p_init = np.empty(n_states)
            p_init.fill(1.0 / max(n_states, 1))
        else:
            p_init = np.array(p_init, dtype=float)

        if p_init.shape != (n_states,):
            raise ParameterError(
                f"p_init.shape={p_init.shape}, must be (n_states,)=({n_states},)"
            )

        for param in (transition, emission, p_init):
            param.setflags(write=False)

        self.transition = transition
        self.emission = emission
        self.p_init = p_init

        # Zero probabilities are legitimate, and map to -inf
        with np.errstate(divide="ignore", invalid="ignore"):
            self._log_trans = np.log(transition)
            self._log_emission = np.log(emission)
            self._log_p_init = np.log(p_init)

    @property
    def n_states(self) -> int:
        return int(self.transition.shape[0])

    @property
    def n_symbols(self) -> int:
        return int(self.emission.shape[1])

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(n_states={self.n_states}, "
            f"n_symbols={self.n_symbols})"
        )

    def _log_prob(self, obs: np.ndarray) -> np.ndarray:
        """Emission log-likelihoods ``log_prob[t, s]`` of an observation sequence.

        Out-of-vocabulary symbols have log-likelihood ``-inf`` in every state.
        """
        log_prob = np.full((len(obs), self.n_states), -np.inf)

        valid = (obs >= 0) & (obs < self.n_symbols)
        log_prob[valid] = self._log_emission[:, obs[valid]].T

        return log_prob

    def viterbi(
        self, observations: Iterable[int], *, return_logp: bool = False
    ) -> Union[np.ndarray, Tuple[np.ndarray, float, np.ndarray]]:
        """Viterbi decoding of a discrete observation sequence.

        The Viterbi algorithm [#]_ computes the most likely sequence of
        hidden states given the observations.

        .. [#] Viterbi, Andrew. "Error bounds for convolutional codes and an
            asymptotically optimum decoding algorithm."
            IEEE transactions on Information Theory 13.2 (1967): 260-269.

        Among equally likely predecessors, and among equally likely
        final states, the lowest state index is chosen.

        Parameters
        ----------
        observations : iterable of int [shape=(n_steps,)]
            observation symbols
        return_logp : bool
            If ``True``, also return the log-likelihood of the state sequence,
            and the log-likelihood of each prefix of the state sequence.

        Returns
        -------
        Either ``states`` or ``(states, logp, step_logp)``:

        states : np.ndarray [shape=(n_steps,), dtype=int]
            The most likely state sequence.
            Empty if there are no observations or no states.
        logp : float
            If ``return_logp=True``, the log probability of ``states`` given
            the observations, or ``-inf`` if ``states`` is empty.
        step_logp : np.ndarray [shape=(n_steps,)]
            If ``return_logp=True``, ``step_logp[t]`` is the log probability
            of the best path prefix ending in ``states[t]`` at time ``t``.

        Raises
        ------
        ParameterError
            If ``observations`` is not a one-dimensional integer sequence.

        See Also
        --------
        forward
        """
        obs = valid_observations(observations)
        n_steps = len(obs)

        if n_steps == 0 or self.n_states == 0:
            states = np.zeros(0, dtype=int)
            if return_logp:
                return states, -np.inf, np.zeros(0)
            return states

        states = np.zeros(n_steps, dtype=int)
        values = np.zeros((n_steps, self.n_states), dtype=float)
        ptr = np.zeros((n_steps, self.n_states), dtype=int)

        _viterbi(
            self._log_prob(obs), self._log_trans, self._log_p_init, states, values, ptr
        )

        if return_logp:
            step_logp = values[np.arange(n_steps), states]
            return states, float(step_logp[-1]), step_logp

        return states

    def forward(self, observations: Iterable[int]) -> Tuple[float, np.ndarray]:
        """Forward algorithm: total log-likelihood of an observation sequence.

        ``alpha[t, j]`` is the log joint probability of the first ``t + 1``
        observations and state ``j`` at time ``t``, summed over all
        state paths.

        Parameters
        ----------
        observations : iterable of int [shape=(n_steps,)]
            observation symbols

        Returns
        -------
        logp : float
            ``log P[observations]``, or ``-inf`` if the sequence is empty
            or impossible under the model.
        alpha : np.ndarray [shape=(n_steps, n_states)]
            the forward lattice of log-probabilities

        See Also
        --------
        backward
        likelihood

        Examples
        --------
        >>> hmm = audioseq.sequence.HiddenMarkovModel(
        ...     [[0.7, 0.3], [0.4, 0.6]], [[0.5, 0.5], [0.1, 0.9]], [0.6, 0.4])
        >>> logp, alpha = hmm.forward([0, 1, 0])
        >>> np.round(np.exp(logp), 6)
        0.069616
        """
        obs = valid_observations(observations)
        alpha = np.zeros((len(obs), self.n_states))

        if len(obs) == 0:
            return -np.inf, alpha

        _forward(self._log_prob(obs), self._log_trans, self._log_p_init, alpha)

        logp = -np.inf
        for value in alpha[-1]:
            logp = log_sum(logp, value)

        return logp, alpha

    def backward(self, observations: Iterable[int]) -> np.ndarray:
        """Backward algorithm.

        ``beta[t, i]`` is the log probability of the observations after
        time ``t``, given state ``i`` at time ``t``.
        ``beta[-1]`` is identically 0.

        Parameters
        ----------
        observations : iterable of int [shape=(n_steps,)]
            observation symbols

        Returns
        -------
        beta : np.ndarray [shape=(n_steps, n_states)]
            the backward lattice of log-probabilities

        See Also
        --------
        forward
        """
        obs = valid_observations(observations)
        beta = np.zeros((len(obs), self.n_states))

        if len(obs) == 0:
            return beta

        _backward(self._log_prob(obs), self._log_trans, beta)

        return beta

    def likelihood(self, observations: Iterable[int]) -> float:
        """Log-likelihood of an observation sequence.

        This is the ``logp`` output of `forward`.
        """
        logp, _ = self.forward(observations)
        return logp


def transition_uniform(n_states: int) -> np.ndarray:
    """Construct a uniform transition matrix over ``n_states``.

    Parameters
    ----------
    n_states : int > 0
        The number of states

    Returns
    -------
    transition : np.ndarray [shape=(n_states, n_states)]
        ``transition[i, j] = 1./n_states``

    Examples
    --------
    >>> audioseq.sequence.transition_uniform(3)
    array([[0.333, 0.333, 0.333],
           [0.333, 0.333, 0.333],
           [0.333, 0.333, 0.333]])
    """
    if not isinstance(n_states, (int, np.integer)) or n_states <= 0:
        raise ParameterError(f"n_states={n_states} must be a positive integer")

    transition = np.empty((n_states, n_states), dtype=np.float64)
    transition.fill(1.0 / n_states)
    return transition


def _self_loop_probs(n_states: int, prob: Any) -> np.ndarray:
    # if it's a float, make it a vector
    prob = np.asarray(prob, dtype=np.float64)

    if prob.ndim == 0:
        prob = np.tile(prob, n_states)

    if prob.shape != (n_states,):
        raise ParameterError(
            f"prob={prob} must have length equal to n_states={n_states}"
        )

    if np.any(prob < 0) or np.any(prob > 1):
        raise ParameterError(f"prob={prob} must have values in the range [0, 1]")

    return prob


def transition_loop(n_states: int, prob: Union[float, Iterable[float]]) -> np.ndarray:
    """Construct a self-loop transition matrix over ``n_states``.

    The transition matrix will have the following properties:

        - ``transition[i, i] = p`` for all ``i``
        - ``transition[i, j] = (1 - p) / (n_states - 1)`` for all ``j != i``

    This type of transition matrix is appropriate when states tend to be
    locally stable, and there is no additional structure between different
    states.

    Parameters
    ----------
    n_states : int > 1
        The number of states
    prob : float in [0, 1] or iterable, length=n_states
        If a scalar, this is the probability of a self-transition.

        If a vector of length ``n_states``, ``p[i]`` is the probability of
        state ``i``'s self-transition.

    Returns
    -------
    transition : np.ndarray [shape=(n_states, n_states)]
        The transition matrix

    Examples
    --------
    >>> audioseq.sequence.transition_loop(3, 0.5)
    array([[0.5 , 0.25, 0.25],
           [0.25, 0.5 , 0.25],
           [0.25, 0.25, 0.5 ]])

    >>> audioseq.sequence.transition_loop(3, [0.8, 0.5, 0.25])
    array([[0.8  , 0.1  , 0.1  ],
           [0.25 , 0.5  , 0.25 ],
           [0.375, 0.375, 0.25 ]])
    """
    if not isinstance(n_states, (int, np.integer)) or n_states <= 1:
        raise ParameterError(f"n_states={n_states} must be a positive integer > 1")

    prob = _self_loop_probs(n_states, prob)

    transition = np.empty((n_states, n_states), dtype=np.float64)

    for i, prob_i in enumerate(prob):
        transition[i] = (1.0 - prob_i) / (n_states - 1)
        transition[i, i] = prob_i

    return transition


def transition_cycle(n_states: int, prob: Union[float, Iterable[float]]) -> np.ndarray:
    """Construct a cyclic transition matrix over ``n_states``.

    The transition matrix will have the following properties:

        - ``transition[i, i] = p``
        - ``transition[i, i + 1] = (1 - p)``

    This type of transition matrix is appropriate for left-to-right
    models whose last state wraps around to the first, such as a
    repeating sequence of sub-word units.

    Parameters
    ----------
    n_states : int > 1
        The number of states
    prob : float in [0, 1] or iterable, length=n_states
        If a scalar, this is the probability of a self-transition.

        If a vector of length ``n_states``, ``p[i]`` is the probability of
        state ``i``'s self-transition.

    Returns
    -------
    transition : np.ndarray [shape=(n_states, n_states)]
        The transition matrix

    Examples
    --------
    >>> audioseq.sequence.transition_cycle(4, 0.9)
    array([[0.9, 0.1, 0. , 0. ],
           [0. , 0.9, 0.1, 0. ],
           [0. , 0. , 0.9, 0.1],
           [0.1, 0. , 0. , 0.9]])
    """
    if not isinstance(n_states, (int, np.integer)) or n_states <= 1:
        raise ParameterError(f"n_states={n_states} must be a positive integer > 1")

    prob = _self_loop_probs(n_states, prob)

    transition = np.zeros((n_states, n_states), dtype=np.float64)

    for i, prob_i in enumerate(prob):
        transition[i, np.mod(i + 1, n_states)] = 1.0 - prob_i
        transition[i, i] = prob_i

    return transition


def emission_gaussian(
    n_states: int, n_symbols: int, *, variance: float = 400.0
) -> np.ndarray:
    """Construct an emission matrix of discretized Gaussian bumps.

    State ``i`` is centered on symbol ``mean_i = (i + 1) * n_symbols / n_states``
    and emits symbol ``o`` with probability proportional to
    ``exp(-0.5 * (o - mean_i) ** 2 / variance)``.
    Each row is normalized to sum to 1.

    Parameters
    ----------
    n_states : int > 0
        The number of states
    n_symbols : int > 0
        The size of the observation vocabulary
    variance : float > 0
        variance of each bump, in squared symbols

    Returns
    -------
    emission : np.ndarray [shape=(n_states, n_symbols)]
        The emission matrix

    Examples
    --------
    >>> emission = audioseq.sequence.emission_gaussian(4, 256)
    >>> emission.shape
    (4, 256)
    >>> emission.argmax(axis=1)
    array([ 64, 128, 192, 255])
    """
    if not isinstance(n_states, (int, np.integer)) or n_states <= 0:
        raise ParameterError(f"n_states={n_states} must be a positive integer")

    if not isinstance(n_symbols, (int, np.integer)) or n_symbols <= 0:
        raise ParameterError(f"n_symbols={n_symbols} must be a positive integer")

    if variance <= 0:
        raise ParameterError(f"variance={variance} must be strictly positive")

    means = (np.arange(n_states) + 1) * n_symbols / n_states
    symbols = np.arange(n_symbols)

    emission = np.exp(-0.5 * np.subtract.outer(means, symbols) ** 2 / variance)
    emission /= emission.sum(axis=1, keepdims=True)

    return emission
