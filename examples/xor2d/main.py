import matplotlib.pyplot as plt

from bpnn import PlaygroundConfig, Trainer
from bpnn.core.logger import setup_logging
from bpnn.util.on_iterate import log_progress, stop_when_below
from bpnn.visualize import plot_decision_boundary, plot_loss_history


setup_logging()


# Set up the playground and train it ########################################

config = PlaygroundConfig(
    dataset='xor',
    input_ids=('x', 'y', 'xTimesY'),
    network_shape=(4, 2),
    learning_rate=0.03,
    batch_size=10,
    noise=10,
    seed=1234,
)

trainer = Trainer(config)
trainer.train(
    500, on_iterate=[log_progress(every=25), stop_when_below(0.01)])

# Look at the result #########################################################

fig, (ax_boundary, ax_loss) = plt.subplots(1, 2, figsize=(12, 5))
plot_decision_boundary(trainer, ax=ax_boundary, show_test=True)
plot_loss_history(trainer.loss_history, ax=ax_loss)
plt.show()
