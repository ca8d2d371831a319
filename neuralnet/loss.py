"""
Loss functions
"""

import numpy as np


class Loss(object):
    """A class of loss functions between an output vector and a target.

    Attributes:
        type: string
            Either 'mse' (mean squared error, default) or 'cross_entropy'
            (binary cross-entropy). Cross-entropy expects outputs in (0, 1),
            i.e. a sigmoid output layer.
        eps: float
            Clipping constant that keeps the cross-entropy finite. Outputs
            outside `[eps, 1 - eps]` are clipped, so both the loss and its
            gradient are flat there.
    Methods:
        eval, grad, get
    """

    TYPES = ('mse', 'cross_entropy')

    def __init__(self, type='mse', eps=1e-8):
        if type not in self.TYPES:
            raise ValueError('Loss.__init__: ' +
                             'Loss type not recognized: {}'.format(type))
        self.type = type
        self.eps  = eps

    def __repr__(self):
        return 'Loss({!r})'.format(self.type)

    @classmethod
    def get(cls, loss):
        if isinstance(loss, cls):
            return loss
        return cls(loss)

    def eval(self, output, target):
        """
        Scalar loss of `output` against `target` (both of length `M`).
        """
        if self.type == 'mse':
            return float(np.mean((output - target) ** 2))
        else:  # cross_entropy
            p = np.clip(output, self.eps, 1. - self.eps)
            return float(-np.mean(target * np.log(p) +
                                  (1. - target) * np.log(1. - p)))

    def grad(self, output, target):
        """
        Gradient of the loss w.r.t. each entry of `output`.
        This is what starts backpropagation at the output layer.
        """
        M = output.shape[0]
        if self.type == 'mse':
            return (2. / M) * (output - target)
        else:  # cross_entropy
            p = np.clip(output, self.eps, 1. - self.eps)
            inside = (output >= self.eps) & (output <= 1. - self.eps)
            return inside * (p - target) / (M * p * (1. - p))
