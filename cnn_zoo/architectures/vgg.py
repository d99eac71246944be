from typing import Sequence, Tuple

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

# (num_convs, num_channels) per block
VGG_11_ARCH: Tuple[Tuple[int, int], ...] = ((1, 64), (1, 128), (2, 256), (2, 512), (2, 512))


def vgg_block(num_convs: int, num_channels: int) -> list:
    """`num_convs` 3×3 convolutions (padding 1) with ReLU, then a 2×2 max pool halving height/width."""
    layers = []
    for _ in range(num_convs):
        layers += [Conv2dConfig(filters=num_channels, kernel=3, padding=1), RELU]
    layers.append(MaxPool2dConfig(kernel=2, stride=2))
    return layers


def vgg(
    conv_arch: Sequence[Tuple[int, int]] = VGG_11_ARCH,
    num_classes: int = 10,
    hidden_units: int = 4096,
    dropout: float = 0.5,
) -> nn.Sequential:
    """
    VGG network built from a table of (num_convs, num_channels) blocks.

    Each entry of `conv_arch` becomes one child `nn.Sequential` (see
    `vgg_block`); the dense part is the same as AlexNet's. The network holds
    `sum(num_convs) + 3` parameter layers.
    """
    layers = [vgg_block(num_convs, num_channels) for num_convs, num_channels in conv_arch]
    layers += [
        FLATTEN,
        LinearConfig(hidden_units),
        RELU,
        DropoutConfig(dropout),
        LinearConfig(hidden_units),
        RELU,
        DropoutConfig(dropout),
        LinearConfig(num_classes),
    ]
    return compose(layers)
