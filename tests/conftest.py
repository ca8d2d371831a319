import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from neuralnet import NN


@pytest.fixture
def golden_params():
    """Hand-picked parameters of a 2-2-1 sigmoid network:
    `(W_hidden, b_hidden, W_output, b_output)`."""
    return ([[0.1, 0.4], [-0.3, 0.2]], [0.0, 0.1],
            [[0.5, -0.6]], [0.2])


@pytest.fixture
def small_nn(golden_params):
    W_hid, b_hid, W_out, b_out = golden_params
    return NN([2, 2, 1], activation='sigmoid',
              weights=[W_hid, W_out], biases=[b_hid, b_out])


@pytest.fixture
def random_nn():
    return NN([3, 4, 2], activation=['tanh', 'sigmoid'], seed=7)


@pytest.fixture
def xor_data():
    X = np.array([[0., 0.], [0., 1.], [1., 0.], [1., 1.]])
    Y = np.array([[0.], [1.], [1.], [0.]])
    return X, Y
