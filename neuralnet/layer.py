"""
Neural network layer class
"""

import numpy as np

from neuralnet.activation import Activation
from neuralnet.algorithm import GradientDescent
from neuralnet.errors import DimensionMismatch, InvalidState, InvalidTopology
from neuralnet.utils import as_vector, init_weights


class Layer(object):
    """A fully-connected layer of a feedforward neural network.

    Includes the weight matrix and the bias vector as well as the
    activation applied to the weighted sums. Usually instantiated by
    `NN.__init__`, but a layer can also be used on its own.

    Attributes:
        __name__: string
            Name of the layer such as `layer3`.
        n_in: int
            Number of input units to the layer.
        n_out: int
            Number of output units to the layer.
        activation: Activation
            An instance of the Activation class (or its name).
        update_rule: GradientDescent
            Object whose `apply(param, grad, learning_rate)` returns the
            updated parameter. Defaults to vanilla gradient descent.
        seed: int
            Random seed for initialization.

    Non-input attributes:
        W: numpy.ndarray
            Weight matrix of size `n_out` times `n_in`.
        b: numpy.ndarray
            Bias vector of size `n_out`.
        rng: numpy.random.RandomState
            Random number generator using `seed`.
        h_in, a_out, h_out: numpy.ndarray
            Input, pre-activation sums and output of the last caching
            `forward` call. `None` when no backward pass is pending.
        grad_W, grad_b: numpy.ndarray
            Gradients computed by the last `backward` call.

    Methods:
        __init__, forward, backward
    """

    def __init__(self, name, n_in, n_out, activation='sigmoid',
                 W=None, b=None, init='uniform', update_rule=None, seed=None):
        """
        Neural network layer initializer.
        """

        for n in (n_in, n_out):
            if not isinstance(n, (int, np.integer)) or isinstance(n, bool) \
                    or n <= 0:
                raise InvalidTopology(
                    '{}: layer widths must be positive integers, '
                    'got ({}, {})'.format(name, n_in, n_out))

        # Attributes
        self.__name__    = name
        self.n_in        = int(n_in)
        self.n_out       = int(n_out)
        self.activation  = Activation.get(activation)
        self.update_rule = update_rule or GradientDescent()
        self.seed        = seed

        # Weight and bias initialization
        self.rng = np.random.RandomState(seed)
        W_init, b_init = init_weights(self.n_in, self.n_out, init, self.rng)
        if W is not None:
            W_init = np.array(W, dtype=float)
            if W_init.shape != (self.n_out, self.n_in):
                raise DimensionMismatch(
                    '{}: weights have shape {}, expected {}'.format(
                        name, W_init.shape, (self.n_out, self.n_in)))
        if b is not None:
            b_init = as_vector(b, self.n_out, name='{} biases'.format(name))
        self.W = W_init
        self.b = b_init

        # Stored values for backpropagation
        self.h_in  = None
        self.a_out = None
        self.h_out = None

        # Gradients from the last backward pass
        self.grad_W = None
        self.grad_b = None

    def __repr__(self):
        return 'Layer({!r}, n_in={}, n_out={}, activation={!r})'.format(
            self.__name__, self.n_in, self.n_out, self.activation.type)

    @property
    def is_forwarded(self):
        """Whether a forward cache is waiting for `backward`."""
        return self.h_in is not None

    @property
    def n_params(self):
        return self.W.size + self.b.size

    def forward(self, h_in, update_units=True):
        """
        Forward propagation of incoming units through the current layer.
        Includes a linear transformation and an activation.

        Args:
            h_in: sequence of reals
                A vector of length `n_in` from the immediate downstream.
            update_units: boolean
                If `True` (default), stores `h_in`, `a_out` and `h_out`
                that are later used for backpropagation. `False` is used
                for prediction and leaves the layer state untouched.
        Returns:
            h_out: numpy.ndarray
                A vector of length `n_out`, the activated units.
        Raises:
            DimensionMismatch: `h_in` does not have length `n_in`.
        """

        h_in = as_vector(h_in, self.n_in, name='{} input'.format(self.__name__))

        # This is `a_out[j] = sum_i W[j, i] * h_in[i] + b[j]`
        a_out = self.W.dot(h_in) + self.b
        h_out = self.activation.eval(a_out)

        if update_units:
            self.h_in  = h_in
            self.a_out = a_out
            self.h_out = h_out

        # The cache stays private to the layer
        return h_out.copy()

    def backward(self, grad_h_out, learning_rate):
        """
        Backpropagation of the gradient w.r.t. the *post-activation* units
        in the upstream (output direction).
        Updates model parameters (`W` and `b`) and returns the gradient w.r.t.
        the post-activation units in the downstream.

        Args:
            grad_h_out: sequence of reals
                A vector of length `n_out`, the gradient of the loss with
                respect to this layer's output.
            learning_rate: float
                Step size handed to the update rule.
        Returns:
            grad_h_in: numpy.ndarray
                A vector of length `n_in`, computed with the weights
                from *before* this update.
        Raises:
            InvalidState: no forward pass is pending.
            DimensionMismatch: `grad_h_out` does not have length `n_out`.
        """

        if not self.is_forwarded:
            raise InvalidState(
                '{}: backward called without a pending forward pass'.format(
                    self.__name__))
        grad_h_out = as_vector(grad_h_out, self.n_out,
                               name='{} output gradient'.format(self.__name__))

        # Compute gradients
        delta       = grad_h_out * self.activation.grad(self.h_out)
        self.grad_W = np.outer(delta, self.h_in)
        self.grad_b = delta
        grad_h_in   = self.W.T.dot(delta)

        # SGD Updates
        self.W = self.update_rule.apply(self.W, self.grad_W, learning_rate)
        self.b = self.update_rule.apply(self.b, self.grad_b, learning_rate)

        # Caches are consumed
        self.h_in  = None
        self.a_out = None
        self.h_out = None

        return grad_h_in
