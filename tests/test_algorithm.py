import numpy as np
import pytest

from neuralnet import GradientDescent, LearningRate


def test_gradient_descent_step():
    param = np.array([1., -2.])
    new = GradientDescent().apply(param, np.array([0.5, 1.]), 0.1)
    np.testing.assert_allclose(new, [0.95, -2.1])
    # The input is left alone
    np.testing.assert_array_equal(param, [1., -2.])


def test_constant_learning_rate():
    lr = LearningRate(0.3)
    lr.epoch = 500
    assert lr.get() == 0.3


def test_decaying_learning_rate():
    lr = LearningRate(0.1, decay_every=100)
    assert lr.get() == pytest.approx(0.1)
    lr.epoch = 99
    assert lr.get() == pytest.approx(0.1)
    lr.epoch = 250
    assert lr.get() == pytest.approx(0.1 / 3.)


@pytest.mark.parametrize('kwargs', [{'const': 0.}, {'const': -1.},
                                    {'const': 0.1, 'decay_every': 0}])
def test_invalid_learning_rate(kwargs):
    with pytest.raises(ValueError):
        LearningRate(**kwargs)
