import numpy as np
import pytest

from neuralnet import Activation


def test_builtin_values():
    a = np.array([-1., 0., 2.])
    np.testing.assert_allclose(Activation('sigmoid').eval(a),
                               1. / (1. + np.exp(-a)))
    np.testing.assert_allclose(Activation('tanh').eval(a), np.tanh(a))
    np.testing.assert_allclose(Activation('relu').eval(a), [0., 0., 2.])
    np.testing.assert_allclose(Activation('linear').eval(a), a)


@pytest.mark.parametrize('type', ['sigmoid', 'tanh', 'relu', 'linear'])
def test_grad_matches_numeric_derivative(type):
    act = Activation(type)
    a = np.array([-1.3, -0.2, 0.4, 1.7])
    eps = 1e-6
    numeric = (act.eval(a + eps) - act.eval(a - eps)) / (2 * eps)
    np.testing.assert_allclose(act.grad(act.eval(a)), numeric, atol=1e-6)


def test_sigmoid_saturates_without_overflow():
    act = Activation('sigmoid')
    h = act.eval(np.array([-1e4, 1e4]))
    np.testing.assert_array_equal(h, [0., 1.])
    np.testing.assert_array_equal(act.grad(h), [0., 0.])


def test_custom_activation():
    softplus = Activation('softplus', fn=lambda a: np.log1p(np.exp(a)),
                          grad=lambda h: 1. - np.exp(-h))
    assert softplus.type == 'softplus'
    np.testing.assert_allclose(softplus.eval(np.array([0.])), [np.log(2.)])
    np.testing.assert_allclose(softplus.grad(np.array([np.log(2.)])), [0.5])


def test_unknown_or_incomplete_activation():
    with pytest.raises(ValueError):
        Activation('softmax')
    with pytest.raises(ValueError):
        Activation('half', fn=lambda a: a / 2.)


def test_get_coerces():
    act = Activation('tanh')
    assert Activation.get(act) is act
    assert Activation.get('relu').type == 'relu'
