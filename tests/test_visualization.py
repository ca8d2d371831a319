import matplotlib.pyplot as plt
import pytest

from neuralnet import NN
from neuralnet.visualization import plot_training_loss


def test_plot_training_loss(xor_data):
    X, Y = xor_data
    nn = NN([2, 3, 1]).train(X, Y, n_epoch=4)
    fig = plot_training_loss(nn, title='xor')
    ax = fig.axes[0]
    assert list(ax.lines[0].get_xdata()) == [1, 2, 3, 4]
    assert ax.get_title() == 'xor'
    plt.close(fig)


def test_plot_on_given_axes(xor_data):
    X, Y = xor_data
    nn = NN([2, 3, 1]).train(X, Y, n_epoch=2)
    fig, ax = plt.subplots()
    assert plot_training_loss(nn, ax=ax) is fig
    plt.close(fig)


def test_plot_requires_history():
    with pytest.raises(ValueError):
        plot_training_loss(NN([2, 1]))
