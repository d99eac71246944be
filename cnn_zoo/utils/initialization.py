from typing import Optional, Sequence

import torch
import torch.nn as nn


def _zero_bias(m):
    if m.bias is not None:
        nn.init.zeros_(m.bias)


def _xavier_init(m):
    if isinstance(m, (nn.Conv2d, nn.Linear)):
        nn.init.xavier_uniform_(m.weight)
        _zero_bias(m)


def _kaiming_init(m):
    # fan-in scaling for ReLU; normal for convolutions, uniform for dense layers
    if isinstance(m, nn.Conv2d):
        nn.init.kaiming_normal_(m.weight, nonlinearity='relu')
        _zero_bias(m)
    elif isinstance(m, nn.Linear):
        nn.init.kaiming_uniform_(m.weight, nonlinearity='relu')
        _zero_bias(m)


_INITIALIZERS = {
    "xavier": _xavier_init,
    "kaiming": _kaiming_init,
}


def initialize(model: nn.Module, input_shape: Sequence[int], method: Optional[str] = "xavier", verbose: bool = False):
    """
    Materialize the lazy layers of `model` and (re)initialize its weights.

    A dry run on zeros of `input_shape` fixes every inferred input dimension.
    `method` is "xavier", "kaiming", or None to keep PyTorch's defaults.
    Returns the model for chaining.
    """
    init_fn = None
    if method is not None:
        key = method.lower()
        if key not in _INITIALIZERS:
            raise ValueError(f"Unknown init method '{method}'. Available: {sorted(_INITIALIZERS)}")
        init_fn = _INITIALIZERS[key]

    was_training = model.training
    model.eval()
    with torch.no_grad():
        dummy = torch.zeros(*input_shape)
        model(dummy)
    model.train(was_training)

    if init_fn is not None:
        model.apply(init_fn)

    if verbose:
        num_params = sum(p.numel() for p in model.parameters())
        print(f"Initialized {type(model).__name__} for input {tuple(input_shape)}: {num_params:,} parameters")
    return model
