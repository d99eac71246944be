import torch.nn as nn

from ..blocks import (
    AvgPool2dConfig,
    Conv2dConfig,
    LinearConfig,
    FLATTEN,
    SIGMOID,
    compose,
)


def lenet(num_classes: int = 10) -> nn.Sequential:
    """
    LeNet-5 with sigmoid activations and average pooling.

    Conv(6, 5×5, pad 2, no bias) → Sigmoid → AvgPool(5×5, stride 2, pad 2)
    → Conv(16, 5×5) → Sigmoid → AvgPool(5×5, stride 2, pad 2)
    → Flatten → Linear(120) → Sigmoid → Linear(84) → Sigmoid → Linear(num_classes)

    For MNIST-sized inputs (N, 1, 28, 28) the flattened features are 16·5·5 = 400.
    """
    pool = AvgPool2dConfig(kernel=5, stride=2, padding=2)
    return compose([
        Conv2dConfig(filters=6, kernel=5, padding=2, bias=False),
        SIGMOID,
        pool,
        Conv2dConfig(filters=16, kernel=5),
        SIGMOID,
        pool,
        FLATTEN,
        LinearConfig(120),
        SIGMOID,
        LinearConfig(84),
        SIGMOID,
        LinearConfig(num_classes),
    ])
