from typing import Optional

from ..config import ModelConfig, DataMetadata
from ..utils.initialization import initialize
from .alexnet import alexnet
from .googlenet import googlenet
from .lenet import lenet
from .nin import nin
from .vgg import vgg


def build_model(model_cfg: ModelConfig, data_meta: Optional[DataMetadata] = None):
    name = model_cfg.model_name.lower()
    num_classes = data_meta.num_classes if data_meta is not None else model_cfg.num_classes

    if name == "lenet":
        model = lenet(num_classes=num_classes)
    elif name == "alexnet":
        model = alexnet(
            num_classes=num_classes,
            hidden_units=model_cfg.hidden_units,
            dropout=model_cfg.dropout,
        )
    elif name == "vgg":
        model = vgg(
            conv_arch=model_cfg.conv_arch,
            num_classes=num_classes,
            hidden_units=model_cfg.hidden_units,
            dropout=model_cfg.dropout,
        )
    elif name == "nin":
        model = nin(num_classes=num_classes, dropout=model_cfg.dropout)
    elif name == "googlenet":
        model = googlenet(num_classes=num_classes)
    else:
        raise ValueError(f"Unknown model_name '{model_cfg.model_name}'.")

    # Without metadata the lazy layers stay uninitialized until the first forward pass.
    if data_meta is not None:
        input_shape = (1, data_meta.input_channels, data_meta.input_size, data_meta.input_size)
        initialize(model, input_shape, method=model_cfg.init)

    return model
