"""
A small feedforward neural network engine
"""

from neuralnet.activation import Activation
from neuralnet.algorithm import GradientDescent, LearningRate
from neuralnet.errors import (DimensionMismatch, InvalidState,
                              InvalidTopology, NeuralNetError)
from neuralnet.layer import Layer
from neuralnet.loss import Loss
from neuralnet.nn import NN

__version__ = '0.1.0'
