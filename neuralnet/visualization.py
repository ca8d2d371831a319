"""
Visualization tools
"""

import matplotlib.pyplot as plt


def plot_training_loss(nn, title='', ax=None):
    """Plots the mean training loss recorded by `NN.train` per epoch.

    Args:
        nn: NN
            A network that has been trained with `NN.train`.
        title: string
            Optional title for the axes.
        ax: matplotlib.axes.Axes
            Axes to draw on. A new figure is created if `None`.
    Returns:
        fig: matplotlib.figure.Figure
            The figure containing the plot.
    """

    if not nn.training_loss:
        raise ValueError('plot_training_loss: no training loss recorded')

    epochs, losses = zip(*nn.training_loss)

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))
    else:
        fig = ax.figure
    ax.plot(epochs, losses, marker='.', label='training')
    ax.set_xlabel('epoch')
    ax.set_ylabel('loss ({})'.format(nn.loss_function.type))
    ax.set_title(title)
    ax.legend()
    return fig
