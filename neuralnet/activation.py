"""
Activation functions
"""

import numpy as np
from scipy.special import expit


class Activation(object):
    """A class of activation functions for neural networks.

    The derivative is expressed in terms of the *output* of the activation,
    which is what the layers cache during forward propagation.

    Attributes:
        type: string
            Either 'sigmoid' (default), 'tanh', 'relu', or 'linear'.
            Any other name is accepted only together with `fn` and `grad`.
        fn, grad_fn: function(numpy.ndarray) -> numpy.ndarray
            Optional custom forward transform and its derivative
            (as a function of the transform's output).
    Methods:
        eval, grad, get
    """

    TYPES = ('sigmoid', 'tanh', 'relu', 'linear')

    def __init__(self, type='sigmoid', fn=None, grad=None):
        if (fn is None) != (grad is None):
            raise ValueError('Activation.__init__: ' +
                             'custom activations need both `fn` and `grad`')
        if fn is None and type not in self.TYPES:
            raise ValueError('Activation.__init__: ' +
                             'Activation type not recognized: {}'.format(type))
        self.type    = type
        self.fn      = fn
        self.grad_fn = grad

    def __repr__(self):
        return 'Activation({!r})'.format(self.type)

    @classmethod
    def get(cls, activation):
        """
        Coerce a name or an `Activation` instance to an instance.
        """
        if isinstance(activation, cls):
            return activation
        return cls(activation)

    def eval(self, a):
        """
        Evaluate the activation at value `a` (vectorized).
        Saturates instead of overflowing for very large `|a|`.
        """
        if self.fn is not None:
            return self.fn(a)
        if self.type == 'sigmoid':
            return expit(a)
        elif self.type == 'tanh':
            return np.tanh(a)
        elif self.type == 'relu':
            return a * (a > 0)
        else:  # linear
            return a

    def grad(self, h):
        """
        Compute the gradient of the activation given its output `h`
        (vectorized).
        """
        if self.grad_fn is not None:
            return self.grad_fn(h)
        if self.type == 'sigmoid':
            return h * (1. - h)
        elif self.type == 'tanh':
            return 1. - h ** 2
        elif self.type == 'relu':
            return (h > 0).astype(float)
        else:  # linear
            return np.ones_like(h)
