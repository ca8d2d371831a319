"""
Feedforward neural network models
"""

import logging

import numpy as np

from neuralnet.activation import Activation
from neuralnet.algorithm import LearningRate
from neuralnet.errors import DimensionMismatch, InvalidState, InvalidTopology
from neuralnet.layer import Layer
from neuralnet.loss import Loss
from neuralnet.utils import as_vector, generate_order

logger = logging.getLogger(__name__)


class NN(object):
    """A neural network class.

    Fully-connected feedforward single- or multi-layer neural networks
    with element-wise activation functions, trained one example at a time
    by backpropagation and gradient descent.

    A `NN` is not safe to use from several threads at once: `forward`,
    `backward` and `train_step` mutate the per-layer caches and parameters.
    Separate instances share no state.

    Attributes:
        architecture: list of ints
            A list of integers that contain the number of neurons per layer,
            starting with the input width. For example, `[2, 2, 1]` indicates
            a one-hidden-layer NN with 2-dimensional inputs, 2 hidden neurons
            and a 1-dimensional output.
        activation: string, Activation, or a list of those
            Choice of activation function. Either one value used by every
            layer, or one value per layer (`len(architecture) - 1` values).
            Defaults to 'sigmoid'.
        loss: string or Loss
            Either 'mse' (default) or 'cross_entropy'.
        learning_rate: float or LearningRate
            Step size used when `train_step` is not given one.
            A float `c` becomes `LearningRate(c)`. Defaults to `0.1`.
        init: string or function(rng, n_out, n_in)
            Weight initialization scheme (see `utils.init_weights`).
        weights, biases: list of array-likes
            Optional caller-supplied parameters, one per layer. They
            override `init`.
        update_rule: GradientDescent
            Update rule shared by all layers. Defaults to vanilla
            gradient descent.
        seed: int
            Random seed for initialization. Layer `i` uses `seed + i`.
            `None` leaves every layer unseeded.

    Non-input Attributes:
        layers: list of `Layer`s
            A list of layers that make up the neural network. A layer includes
            the incoming weight matrix and the bias vector to its units.
        epoch: int
            Number of epochs completed by `train`.
        training_loss: list of (int, float)
            Mean training loss recorded after each epoch.

    Methods:
        __init__, forward, predict, loss, backward, train_step, train,
        compute_loss, get_params, set_params
    """

    def __init__(self, architecture=(2, 2, 1), activation='sigmoid',
                 loss='mse', learning_rate=0.1, init='uniform',
                 weights=None, biases=None, update_rule=None, seed=0):
        """
        Neural network model initializer.
        """

        architecture = list(architecture)
        if len(architecture) < 2:
            raise InvalidTopology(
                'architecture needs an input width and at least one layer, '
                'got {}'.format(architecture))
        n_layers = len(architecture) - 1

        # Attributes
        self.architecture  = architecture
        self.loss_function = Loss.get(loss)
        self.learning_rate = learning_rate
        self.init          = init
        self.seed          = seed

        # Turn `activation` and `learning_rate` to class instances
        if isinstance(activation, (list, tuple)):
            if len(activation) != n_layers:
                raise InvalidTopology(
                    'got {} activations for {} layers'.format(
                        len(activation), n_layers))
            self.activation = [Activation.get(a) for a in activation]
        else:
            self.activation = [Activation.get(activation)] * n_layers
        if not isinstance(self.learning_rate, LearningRate):
            self.learning_rate = LearningRate(self.learning_rate)

        for name, given in (('weights', weights), ('biases', biases)):
            if given is not None and len(given) != n_layers:
                raise InvalidTopology(
                    'got {} {} for {} layers'.format(len(given), name, n_layers))

        # Initialize a list of layers
        self.layers = []
        for i, (n_in, n_out) in enumerate(zip(architecture[:-1],
                                              architecture[1:])):
            l = Layer('layer{}'.format(i), n_in, n_out, self.activation[i],
                      W=None if weights is None else weights[i],
                      b=None if biases is None else biases[i],
                      init=init, update_rule=update_rule,
                      seed=None if seed is None else seed + i)
            self.layers.append(l)
        self.layers[-1].__name__ = 'output_layer'

        for prev, nxt in zip(self.layers[:-1], self.layers[1:]):
            if prev.n_out != nxt.n_in:
                raise InvalidTopology('{} has {} outputs but {} expects {}'.format(
                    prev.__name__, prev.n_out, nxt.__name__, nxt.n_in))

        # Training updates
        self.epoch = 0
        self.training_loss = []

    def __repr__(self):
        return 'NN(architecture={}, activation={}, loss={!r})'.format(
            self.architecture, [a.type for a in self.activation],
            self.loss_function.type)

    @property
    def n_in(self):
        return self.layers[0].n_in

    @property
    def n_out(self):
        return self.layers[-1].n_out

    def forward(self, x, update_units=True):
        """Forward propagation of an input through every layer.

        Args:
            x: sequence of reals
                Input vector of length `architecture[0]`.
            update_units: boolean
                If `True` (default), each layer caches what the following
                `backward` needs.
        Returns:
            h: numpy.ndarray
                Output of the last layer.
        Raises:
            DimensionMismatch: `x` has the wrong length. No layer is touched.
        """
        h = as_vector(x, self.n_in)
        for l in self.layers:
            h = l.forward(h, update_units=update_units)
        return h

    def predict(self, x):
        """
        Output for `x` using current model parameters, without caching.
        """
        return self.forward(x, update_units=False)

    def loss(self, output, target):
        """Loss of `output` against `target` and its gradient.

        Args:
            output, target: sequence of reals
                Vectors of equal length.
        Returns:
            loss: float
                Scalar loss, e.g. `(1/M) * sum_j (output[j] - target[j])**2`.
            grad: numpy.ndarray
                Gradient of the loss w.r.t. `output`, which starts
                backpropagation.
        Raises:
            DimensionMismatch: the lengths differ.
        """
        output = as_vector(output, name='output')
        target = as_vector(target, output.shape[0], name='target')
        return (self.loss_function.eval(output, target),
                self.loss_function.grad(output, target))

    def backward(self, grad_output, learning_rate=None):
        """Backpropagation through every layer in reverse order.

        Each layer updates its own parameters and hands the gradient w.r.t.
        its input to the preceding layer.

        Args:
            grad_output: sequence of reals
                Gradient of the loss w.r.t. the network output.
            learning_rate: float
                Defaults to the current value of `self.learning_rate`.
        Returns:
            grad: numpy.ndarray
                Gradient of the loss w.r.t. the network input.
        Raises:
            InvalidState: some layer has no pending forward pass.
                No parameter is changed in that case.
            DimensionMismatch: `grad_output` has the wrong length.
        """
        pending = [l.__name__ for l in self.layers if not l.is_forwarded]
        if pending:
            raise InvalidState('backward called without a pending forward '
                               'pass in {}'.format(', '.join(pending)))
        if learning_rate is None:
            learning_rate = self.learning_rate.get()

        grad = as_vector(grad_output, self.n_out, name='output gradient')
        for l in self.layers[::-1]:
            grad = l.backward(grad, learning_rate)
        return grad

    def train_step(self, x, target, learning_rate=None):
        """Train on a single example: forward, loss, backward and update.

        Args:
            x: sequence of reals
                Input vector.
            target: sequence of reals
                Target output vector.
            learning_rate: float
                Defaults to the current value of `self.learning_rate`.
        Returns:
            loss: float
                Loss of the output computed *before* the update.
        Raises:
            DimensionMismatch: `x` or `target` has the wrong length.
                Checked before anything is mutated.
        """
        x      = as_vector(x, self.n_in)
        target = as_vector(target, self.n_out, name='target')

        output = self.forward(x)
        loss, grad = self.loss(output, target)
        self.backward(grad, learning_rate)

        logger.debug('train_step: loss %.6f', loss)
        return loss

    def compute_loss(self, X, Y):
        """Computes the mean loss of `self.predict` over a dataset.

        Args:
            X: numpy.ndarray
                Input data of size `n` (sample size) by `p` (input width).
            Y: numpy.ndarray
                Targets of size `n` by `k` (output width).
        Returns:
            loss: float
                Mean loss over data.
        """
        X, Y = self._check_data(X, Y)
        return float(np.mean([self.loss(self.predict(x), y)[0]
                              for x, y in zip(X, Y)]))

    def train(self, X, Y, n_epoch=1, shuffle=True, batch_seed=0,
              verbose=False):
        """Train the neural network with data, one example at a time.

        Args:
            X: numpy.ndarray
                Input data of size `n` (sample size) by `p` (input width).
            Y: numpy.ndarray
                Targets of size `n` by `k` (output width).
            n_epoch: int
                Number of epochs to train on the input data.
            shuffle: bool
                If true (default), visit examples in a random order that
                changes every epoch.
            batch_seed: int
                First random seed for the example ordering.
            verbose: bool
                If true, log the mean training loss of each epoch at
                INFO level. Otherwise it is logged at DEBUG level.
        Returns:
            nn: NN
                Trained `NN` model.
        """

        X, Y = self._check_data(X, Y)
        n = X.shape[0]
        level = logging.INFO if verbose else logging.DEBUG

        for t in range(n_epoch):

            losses = [self.train_step(X[i], Y[i])
                      for i in generate_order(n, shuffle, batch_seed + t)]

            self.epoch += 1
            self.learning_rate.epoch = self.epoch

            training_loss = float(np.mean(losses))
            self.training_loss.append((self.epoch, training_loss))
            logger.log(level, 'epoch %3d | training loss %.6f',
                       self.epoch, training_loss)

        return self

    def get_params(self):
        """
        Parameters as plain nested lists, one `{'W': ..., 'b': ...}` per
        layer, for the caller to serialize as it sees fit.
        """
        return [{'W': l.W.tolist(), 'b': l.b.tolist()} for l in self.layers]

    def set_params(self, params):
        """Replace every layer's parameters.

        Args:
            params: list of dicts
                As returned by `get_params`.
        Raises:
            DimensionMismatch: any shape is wrong. Nothing is assigned then.
        """
        if len(params) != len(self.layers):
            raise DimensionMismatch('got parameters for {} layers, '
                                    'expected {}'.format(len(params),
                                                         len(self.layers)))
        new = []
        for l, p in zip(self.layers, params):
            W = np.array(p['W'], dtype=float)
            if W.shape != l.W.shape:
                raise DimensionMismatch('{}: weights have shape {}, '
                                        'expected {}'.format(l.__name__,
                                                             W.shape, l.W.shape))
            b = as_vector(p['b'], l.n_out, name='{} biases'.format(l.__name__))
            new.append((W, b))
        for l, (W, b) in zip(self.layers, new):
            l.W, l.b = W, b

    def _check_data(self, X, Y):
        X = np.array(X, dtype=float)
        Y = np.array(Y, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.n_in:
            raise DimensionMismatch('X has shape {}, expected (n, {})'.format(
                X.shape, self.n_in))
        if Y.ndim != 2 or Y.shape != (X.shape[0], self.n_out):
            raise DimensionMismatch('Y has shape {}, expected ({}, {})'.format(
                Y.shape, X.shape[0], self.n_out))
        if X.shape[0] == 0:
            raise DimensionMismatch('X and Y contain no examples')
        return X, Y
