import numpy as np
import matplotlib.pyplot as plt


def decision_grid(trainer, density=100, domain=(-6, 6)):
    """ Evaluate the trainer's network on a regular grid over the plane

    Parameters
    ----------
    trainer: Trainer

    density: int, default=100
        The number of grid points along each axis.

    domain: 2-tuple, default=(-6, 6)
        The interval covered along both axes.

    Returns
    -------
    xs, ys, values: ndarray, ndarray, ndarray (shape=(density, density))
        `values[i, j]` is the network output at `(xs[j], ys[i])`.
    """
    xs = np.linspace(domain[0], domain[1], density)
    ys = np.linspace(domain[0], domain[1], density)
    values = np.zeros((density, density))

    for i, y in enumerate(ys):
        for j, x in enumerate(xs):
            values[i, j] = trainer.predict(x, y)

    return xs, ys, values


def plot_decision_boundary(
        trainer, ax=None, density=100, domain=(-6, 6), show_test=False,
        img_kwargs=dict(cmap=plt.cm.RdBu, vmin=-1, vmax=1),
        point_kwargs=dict(edgecolors='k', s=20)):
    """ Draw the network output as a heat map with the training points
    (and optionally the testing points) on top

    Parameters
    ----------
    trainer: Trainer

    ax: matplotlib axis, default=None
        Drawn onto a new figure if None.

    density, domain:
        See :func:`decision_grid`.

    show_test: bool, default=False
        Also plot the testing examples.

    img_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.imshow`.

    point_kwargs: args
        Any keyword arguments that can be passed to
        `matplotlib.pyplot.scatter`.
    """
    if ax is None:
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111)

    xs, ys, values = decision_grid(trainer, density=density, domain=domain)
    extent = [domain[0], domain[1], domain[0], domain[1]]
    ax.imshow(values, origin='lower', extent=extent, **img_kwargs)

    examples = list(trainer.train_data)
    if show_test:
        examples += list(trainer.test_data)

    if examples:
        points = np.array([(e.x, e.y, e.label) for e in examples])
        ax.scatter(points[:, 0], points[:, 1], c=points[:, 2],
                   cmap=img_kwargs.get('cmap'), vmin=-1, vmax=1,
                   **point_kwargs)

    ax.set_xlim(domain)
    ax.set_ylim(domain)
    ax.set_title("Iteration {:d}".format(trainer.iteration))

    return ax


def plot_loss_history(loss_history, ax=None):
    """ Plot training and testing loss against the iteration number

    Parameters
    ----------
    loss_history: list of StepResult
        E.g., :code:`trainer.loss_history`.

    ax: matplotlib axis, default=None
    """
    if len(loss_history) == 0:
        raise ValueError("`loss_history` is empty")

    if ax is None:
        fig = plt.figure(figsize=(6, 3))
        ax = fig.add_subplot(111)

    history = np.array([(r.iteration, r.loss_train, r.loss_test)
                        for r in loss_history])
    ax.plot(history[:, 0], history[:, 1], label='Training loss')
    ax.plot(history[:, 0], history[:, 2], label='Testing loss')
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Loss')
    ax.legend()

    return ax
