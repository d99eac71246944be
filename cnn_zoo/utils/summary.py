from typing import Sequence

import pandas as pd
import torch
import torch.nn as nn
from torch.nn.parameter import UninitializedParameter


def _num_params(module: nn.Module) -> int:
    return sum(p.numel() for p in module.parameters() if not isinstance(p, UninitializedParameter))


def summarize(model: nn.Sequential, input_shape: Sequence[int], verbose: bool = True) -> pd.DataFrame:
    """
    Feed a random batch through each top-level stage of `model` in turn and
    record the output shape after it.

    Running the stages materializes any lazy layers, so parameter counts are
    exact. Returns a DataFrame with columns
    `stage`, `layer`, `output_shape`, `num_params`.
    """
    rows = []
    was_training = model.training
    model.eval()
    x = torch.rand(*input_shape)
    with torch.no_grad():
        for name, stage in model.named_children():
            x = stage(x)
            rows.append({
                'stage': name,
                'layer': type(stage).__name__,
                'output_shape': tuple(x.shape),
                'num_params': _num_params(stage),
            })
    model.train(was_training)

    summary_df = pd.DataFrame(rows, columns=['stage', 'layer', 'output_shape', 'num_params'])

    if verbose:
        print(f"{'stage':>5} {'layer':>20} {'output shape':>24} {'params':>12}")
        for row in rows:
            print(f"{row['stage']:>5} {row['layer']:>20} {str(row['output_shape']):>24} {row['num_params']:12,d}")
        print(f"Total params: {int(summary_df['num_params'].sum()):,}")
    return summary_df
