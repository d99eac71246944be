import torch.nn as nn

from ..blocks import (
    Conv2dConfig,
    DropoutConfig,
    MaxPool2dConfig,
    FLATTEN,
    GLOBAL_AVG_POOL,
    RELU,
    Size2d,
    compose,
)


def nin_block(num_channels: int, kernel: Size2d, stride: Size2d, padding: Size2d) -> list:
    """
    One convolution of user-chosen window followed by two 1×1 convolutions.

    The 1×1 convolutions act as per-pixel fully-connected layers; all three
    produce `num_channels` channels and are followed by ReLU.
    """
    return [
        Conv2dConfig(filters=num_channels, kernel=kernel, stride=stride, padding=padding),
        RELU,
        Conv2dConfig(filters=num_channels, kernel=1),
        RELU,
        Conv2dConfig(filters=num_channels, kernel=1),
        RELU,
    ]


def nin(num_classes: int = 10, dropout: float = 0.5) -> nn.Sequential:
    """Network in Network. No dense layers: the last NiN block emits one channel per class and global average pooling reduces each to a score."""
    pool = MaxPool2dConfig(kernel=3, stride=2)
    return compose([
        nin_block(96, kernel=11, stride=4, padding=0),
        pool,
        nin_block(256, kernel=5, stride=1, padding=2),
        pool,
        nin_block(384, kernel=3, stride=1, padding=1),
        pool,
        DropoutConfig(dropout),
        nin_block(num_classes, kernel=3, stride=1, padding=1),
        GLOBAL_AVG_POOL,
        # (N, num_classes, 1, 1) -> (N, num_classes)
        FLATTEN,
    ])
