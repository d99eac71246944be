import torch.nn as nn

from ..blocks import (
    Conv2dConfig,
    DropoutConfig,
    LinearConfig,
    MaxPool2dConfig,
    FLATTEN,
    RELU,
    compose,
)


def alexnet(num_classes: int = 10, hidden_units: int = 4096, dropout: float = 0.5) -> nn.Sequential:
    """
    AlexNet for 224×224 inputs.

    Five convolutions (96 → 256 → 384 → 384 → 256) with max pooling after the
    first, second and fifth, followed by two dropout-regularised dense layers
    and the classifier. The classifier has `num_classes` outputs (10 for
    Fashion-MNIST rather than the 1000 of the paper).
    """
    pool = MaxPool2dConfig(kernel=3, stride=2)
    return compose([
        Conv2dConfig(filters=96, kernel=11, stride=4),
        RELU,
        pool,
        # smaller window, padding keeps height/width, more channels
        Conv2dConfig(filters=256, kernel=5, padding=2),
        RELU,
        pool,
        # three successive 3×3 convolutions without pooling in between
        Conv2dConfig(filters=384, kernel=3, padding=1),
        RELU,
        Conv2dConfig(filters=384, kernel=3, padding=1),
        RELU,
        Conv2dConfig(filters=256, kernel=3, padding=1),
        RELU,
        pool,
        FLATTEN,
        LinearConfig(hidden_units),
        RELU,
        DropoutConfig(dropout),
        LinearConfig(hidden_units),
        RELU,
        DropoutConfig(dropout),
        LinearConfig(num_classes),
    ])
