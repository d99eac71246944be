from dataclasses import dataclass
from typing import Optional, Tuple

from .architectures.vgg import VGG_11_ARCH


@dataclass
class ModelConfig:
    model_name: str = "lenet"
    num_classes: int = 10
    conv_arch: Tuple[Tuple[int, int], ...] = VGG_11_ARCH  # vgg only
    hidden_units: int = 4096                               # alexnet / vgg dense width
    dropout: float = 0.5
    init: Optional[str] = "xavier"                         # applied only when input shape is known


@dataclass
class DataMetadata:
    dataset_key: str
    num_classes: int
    input_channels: int
    input_size: int
