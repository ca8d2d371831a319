"""
Exceptions raised by the network engine
"""


class NeuralNetError(Exception):
    """Base class for all errors raised by `neuralnet`."""


class DimensionMismatch(NeuralNetError, ValueError):
    """A vector or matrix has the wrong length for the network topology.

    Raised by `Layer.forward`, `Layer.backward`, `NN.loss`, `NN.train_step`
    and by layer construction when caller-supplied weights are misshaped.
    Nothing is mutated when this is raised.
    """


class InvalidState(NeuralNetError, RuntimeError):
    """`backward` was called without a pending forward cache."""


class InvalidTopology(NeuralNetError, ValueError):
    """The network was built with zero layers, a zero-width layer, or
    mismatched adjacent widths."""
