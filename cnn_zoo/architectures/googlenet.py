from typing import Tuple

import torch.nn as nn

from ..blocks import (
    Conv2dConfig,
    LinearConfig,
    MaxPool2dConfig,
    ParallelConfig,
    FLATTEN,
    GLOBAL_AVG_POOL,
    RELU,
    compose,
)

_POOL = MaxPool2dConfig(kernel=3, stride=2, padding=1)


def inception_block(c1: int, c2: Tuple[int, int], c3: Tuple[int, int], c4: int) -> ParallelConfig:
    """
    Inception block with four parallel paths, concatenated on the channel axis.

    Args:
        c1: output channels of path 1, a single 1×1 convolution.
        c2: (reduce, out) channels of path 2, 1×1 convolution then 3×3 convolution.
        c3: (reduce, out) channels of path 3, 1×1 convolution then 5×5 convolution.
        c4: output channels of path 4, 3×3 max pool then 1×1 convolution.

    Every path preserves height and width, so the block outputs
    c1 + c2[1] + c3[1] + c4 channels at the input resolution.
    """
    p1 = (Conv2dConfig(filters=c1, kernel=1), RELU)
    p2 = (
        Conv2dConfig(filters=c2[0], kernel=1), RELU,
        Conv2dConfig(filters=c2[1], kernel=3, padding=1), RELU,
    )
    p3 = (
        Conv2dConfig(filters=c3[0], kernel=1), RELU,
        Conv2dConfig(filters=c3[1], kernel=5, padding=2), RELU,
    )
    p4 = (
        MaxPool2dConfig(kernel=3, stride=1, padding=1),
        Conv2dConfig(filters=c4, kernel=1), RELU,
    )
    return ParallelConfig(paths=(p1, p2, p3, p4), dim=1)


def googlenet(num_classes: int = 10) -> nn.Sequential:
    """
    GoogLeNet as five sequential stages plus the classifier.

    Stages 1-2 are plain convolutions, stages 3-5 stack inception blocks
    (2, 5 and 2 of them). Every stage but the last halves height/width with a
    3×3 stride-2 max pool; the last ends in global average pooling. The
    network works with 96×96 inputs as well as 224×224.
    """
    b1 = [Conv2dConfig(filters=64, kernel=7, stride=2, padding=3), RELU, _POOL]
    b2 = [
        Conv2dConfig(filters=64, kernel=1), RELU,
        Conv2dConfig(filters=192, kernel=3, padding=1), RELU,
        _POOL,
    ]
    b3 = [
        inception_block(64, (96, 128), (16, 32), 32),
        inception_block(128, (128, 192), (32, 96), 64),
        _POOL,
    ]
    b4 = [
        inception_block(192, (96, 208), (16, 48), 64),
        inception_block(160, (112, 224), (24, 64), 64),
        inception_block(128, (128, 256), (24, 64), 64),
        inception_block(112, (144, 288), (32, 64), 64),
        inception_block(256, (160, 320), (32, 128), 128),
        _POOL,
    ]
    b5 = [
        inception_block(256, (160, 320), (32, 128), 128),
        inception_block(384, (192, 384), (48, 128), 128),
        GLOBAL_AVG_POOL,
        FLATTEN,
    ]
    return compose([b1, b2, b3, b4, b5, LinearConfig(num_classes)])
