"""
Training algorithms and related classes
"""


class LearningRate(object):
    """Learning rate function class.

    Attributes:
        const: float
            Constant term for the learning rate.
        decay_every: int or None
            If set, the rate becomes `const / (epoch // decay_every + 1.)`.
            Otherwise the rate stays at `const`.
        epoch: int
            Current epoch number, updated from `NN.train`.
    """
    def __init__(self, const, decay_every=None, epoch=0):
        if const <= 0:
            raise ValueError('LearningRate: `const` must be positive')
        if decay_every is not None and decay_every <= 0:
            raise ValueError('LearningRate: `decay_every` must be positive')
        self.const       = float(const)
        self.decay_every = decay_every
        self.epoch       = epoch

    def __repr__(self):
        return 'LearningRate(const={}, decay_every={}, epoch={})'.format(
            self.const, self.decay_every, self.epoch)

    def lr(self, t):
        if self.decay_every is None:
            return self.const
        return self.const / (t // self.decay_every + 1.)

    def get(self):
        return self.lr(self.epoch)


class GradientDescent(object):
    """Vanilla gradient descent: `param <- param - learning_rate * grad`.

    This is the default update rule of every `Layer`. Any object with
    the same `apply` method can be passed as `update_rule` instead.
    """

    def apply(self, param, grad, learning_rate):
        """
        Return the updated parameter. `param` is not modified.
        """
        return param - learning_rate * grad

    def __repr__(self):
        return 'GradientDescent()'
