"""
Utility functions
"""

import numpy as np

from neuralnet.errors import DimensionMismatch

INIT_SCHEMES = ('uniform', 'normal', 'zeros')


def as_vector(x, n=None, name='input'):
    """Coerce a real sequence to a 1-D float array.

    Args:
        x: sequence of reals or numpy.ndarray
            The vector to convert.
        n: int
            Expected length. If given, a vector of any other length
            is rejected.
        name: string
            Used in the error message.
    Returns:
        v: numpy.ndarray
            A new float64 array of shape `(len(x),)`.
    Raises:
        DimensionMismatch: `x` is not one-dimensional or has the wrong length.
    """
    v = np.array(x, dtype=float)
    if v.ndim != 1:
        raise DimensionMismatch(
            '{} must be a flat vector, got shape {}'.format(name, v.shape))
    if n is not None and v.shape[0] != n:
        raise DimensionMismatch(
            '{} has length {}, expected {}'.format(name, v.shape[0], n))
    return v


def init_weights(n_in, n_out, scheme='uniform', rng=None):
    """Initialize a weight matrix and a bias vector.

    Args:
        n_in, n_out: int
            Number of input and output units of the layer.
        scheme: string or function(rng, n_out, n_in)
            'uniform' (default) draws from `U(-c, c)` with
            `c = sqrt(6 / (n_in + n_out))`; 'normal' draws from
            `N(0, 1) / sqrt(n_in)`; 'zeros' sets every weight to zero.
            A callable receives the random state and the shape and
            returns the weight matrix.
        rng: numpy.random.RandomState
            Random number generator. A fresh unseeded one if omitted.
    Returns:
        W: numpy.ndarray
            Weight matrix of size `n_out` by `n_in`.
        b: numpy.ndarray
            Zero bias vector of size `n_out`.
    """
    if rng is None:
        rng = np.random.RandomState()

    if callable(scheme):
        W = np.array(scheme(rng, n_out, n_in), dtype=float)
        if W.shape != (n_out, n_in):
            raise DimensionMismatch(
                'initializer returned shape {}, expected {}'.format(
                    W.shape, (n_out, n_in)))
    elif scheme == 'uniform':
        c = np.sqrt(6. / (n_in + n_out))
        W = rng.uniform(-c, c, size=(n_out, n_in))
    elif scheme == 'normal':
        W = rng.normal(size=(n_out, n_in)) / np.sqrt(n_in)
    elif scheme == 'zeros':
        W = np.zeros((n_out, n_in))
    else:
        raise ValueError('utils.init_weights: ' +
                         'initialization scheme not recognized: {}'.format(scheme))

    return W, np.zeros(n_out)


def generate_order(n, shuffle=True, seed=None):
    """A generator for the order in which examples are visited.

    Args:
        n: int
            Total number of data points to choose from.
        shuffle: bool
            If false, yields `0, 1, ..., n-1`.
        seed: int
            Random seed for ordering of data.

    Returns:
        A generator that each time yields the index of one example.
    """
    if not shuffle:
        for i in range(n):
            yield i
        return
    rng  = np.random.RandomState(seed)
    perm = rng.permutation(n)
    for i in perm:
        yield int(i)
