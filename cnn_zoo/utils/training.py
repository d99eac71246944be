"""
Hand-written training building blocks for the from-scratch chapters.

These work directly on tensors and parameter lists rather than on
`nn.Module`/`torch.optim`, so every step of a training iteration stays
visible in the calling code.
"""

from typing import List

import torch


def linreg(x: torch.Tensor, w: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """Linear regression model: x·w + b."""
    return x @ w + b


def squared_loss(y_hat: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
    """Elementwise squared loss (y_hat - y)² / 2, with `y` reshaped to `y_hat`."""
    diff = y_hat - y.reshape(y_hat.shape)
    return diff * diff / 2


def sgd(params: List[torch.Tensor], lr: float, batch_size: int) -> None:
    """
    Minibatch stochastic gradient descent.

    Each entry of `params` is replaced by param - grad * lr / batch_size.
    The replacement is a fresh leaf tensor (it keeps `requires_grad`), and the
    gradient of the old parameter is released. Callers that hold on to the
    old tensors must read the updated values back from `params`.
    """
    for i, param in enumerate(params):
        with torch.no_grad():
            updated = param - param.grad * lr / batch_size
        params[i] = updated.requires_grad_(param.requires_grad)
        param.grad = None


def sgd_inplace(params: List[torch.Tensor], lr: float, batch_size: int) -> None:
    """
    Same update as `sgd` but applied to the parameter tensors themselves.

    The gradients are zeroed afterwards: torch accumulates into `.grad` on
    every backward pass, so leaving them would add this step's gradient to
    the next one.
    """
    with torch.no_grad():
        for param in params:
            param -= param.grad * lr / batch_size
            param.grad.zero_()


def accuracy(y_hat: torch.Tensor, y: torch.Tensor) -> float:
    """
    Number of correct predictions in a batch.

    When `y_hat` holds one score per class (more than one column) the predicted
    class is its argmax along axis 1; otherwise `y_hat` already holds class
    labels. The count is not divided by the batch size.
    """
    if y_hat.dim() > 1 and y_hat.shape[1] > 1:
        y_hat = y_hat.argmax(dim=1)
    elif y_hat.numel() == y.numel():
        # (N, 1) labels against (N,) targets must not broadcast to (N, N)
        y_hat = y_hat.reshape(y.shape)
    matches = y_hat.to(torch.int32) == y.to(torch.int32)
    return float(matches.sum().to(torch.float32).item())
