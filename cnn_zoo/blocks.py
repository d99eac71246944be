"""
Layer configuration and composition.

Each layer of a network is described by a small frozen dataclass. The
architectures in `cnn_zoo.architectures` are ordered lists of these configs,
which `compose` turns into an `nn.Sequential`.

Convolutions and linear layers are built as lazy modules: their input
channels / features are inferred on the first forward pass, so a list of
configs never has to state the shape of what flows into it. A composition
whose shapes do not line up only fails when it is first executed.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import torch
import torch.nn as nn

Size2d = Union[int, Tuple[int, int]]


@dataclass(frozen=True)
class Conv2dConfig:
    filters: int
    kernel: Size2d
    stride: Size2d = 1
    padding: Size2d = 0
    bias: bool = True


@dataclass(frozen=True)
class MaxPool2dConfig:
    kernel: Size2d
    stride: Optional[Size2d] = None  # defaults to kernel
    padding: Size2d = 0


@dataclass(frozen=True)
class AvgPool2dConfig:
    kernel: Size2d
    stride: Optional[Size2d] = None
    padding: Size2d = 0


@dataclass(frozen=True)
class GlobalAvgPool2dConfig:
    pass


@dataclass(frozen=True)
class LinearConfig:
    units: int
    bias: bool = True


@dataclass(frozen=True)
class DropoutConfig:
    rate: float = 0.5


@dataclass(frozen=True)
class ActivationConfig:
    name: str = "relu"


@dataclass(frozen=True)
class FlattenConfig:
    """Batch flatten: (N, C, H, W) -> (N, C*H*W)."""


@dataclass(frozen=True)
class ParallelConfig:
    """Runs every path on the same input and concatenates the results along `dim`."""
    paths: Tuple[tuple, ...]
    dim: int = 1


LayerConfig = Union[
    Conv2dConfig,
    MaxPool2dConfig,
    AvgPool2dConfig,
    GlobalAvgPool2dConfig,
    LinearConfig,
    DropoutConfig,
    ActivationConfig,
    FlattenConfig,
    ParallelConfig,
]

# shorthands used by the architecture tables
RELU = ActivationConfig("relu")
SIGMOID = ActivationConfig("sigmoid")
FLATTEN = FlattenConfig()
GLOBAL_AVG_POOL = GlobalAvgPool2dConfig()

_ACTIVATIONS = {
    "relu": nn.ReLU,
    "sigmoid": nn.Sigmoid,
    "tanh": nn.Tanh,
}


class Concat(nn.Module):
    """
    Parallel composition of sub-networks.

    Every path receives the same input; the outputs are concatenated along
    `dim` (the channel axis for image tensors). The paths must agree on every
    other dimension, which for the inception block means each path keeps the
    spatial size of its input.
    """

    def __init__(self, paths: Sequence[nn.Module], dim: int = 1):
        super().__init__()
        self.paths = nn.ModuleList(paths)
        self.dim = dim

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return torch.cat([path(x) for path in self.paths], dim=self.dim)


def build_layer(cfg) -> nn.Module:
    """Build the module described by a single layer config (or a nested list of them)."""
    if isinstance(cfg, (list, tuple)):
        return compose(cfg)

    if isinstance(cfg, Conv2dConfig):
        return nn.LazyConv2d(
            out_channels=cfg.filters,
            kernel_size=cfg.kernel,
            stride=cfg.stride,
            padding=cfg.padding,
            bias=cfg.bias,
        )
    if isinstance(cfg, MaxPool2dConfig):
        return nn.MaxPool2d(kernel_size=cfg.kernel, stride=cfg.stride, padding=cfg.padding)
    if isinstance(cfg, AvgPool2dConfig):
        return nn.AvgPool2d(kernel_size=cfg.kernel, stride=cfg.stride, padding=cfg.padding)
    if isinstance(cfg, GlobalAvgPool2dConfig):
        return nn.AdaptiveAvgPool2d(output_size=(1, 1))
    if isinstance(cfg, LinearConfig):
        return nn.LazyLinear(out_features=cfg.units, bias=cfg.bias)
    if isinstance(cfg, DropoutConfig):
        return nn.Dropout(p=cfg.rate)
    if isinstance(cfg, ActivationConfig):
        name = cfg.name.lower()
        if name not in _ACTIVATIONS:
            raise ValueError(f"Unknown activation '{cfg.name}'. Available: {sorted(_ACTIVATIONS)}")
        return _ACTIVATIONS[name]()
    if isinstance(cfg, FlattenConfig):
        return nn.Flatten()
    if isinstance(cfg, ParallelConfig):
        return Concat([compose(path) for path in cfg.paths], dim=cfg.dim)

    raise ValueError(f"Unknown layer config {cfg!r}.")


def compose(cfgs: Sequence) -> nn.Sequential:
    """Turn an ordered list of layer configs into an `nn.Sequential`.

    Nested lists become nested `nn.Sequential` blocks, so a stage of a network
    can be written as its own list and still show up as one child module.
    """
    return nn.Sequential(*[build_layer(cfg) for cfg in cfgs])
