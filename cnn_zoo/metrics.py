"""
Training metrics.

A metric accumulates a value over the batches of an epoch:

    >>> acc = Accuracy()
    >>> for xb, yb in loader:
    ...     acc.update(yb, model(xb))
    >>> acc.get_metric()
    ('Accuracy', 0.91)
    >>> acc.reset()

Accumulators are plain Python numbers, so metrics hold no references to
tensors between batches and `duplicate()` never shares state.
"""

import copy
from abc import ABC, abstractmethod
from typing import Tuple

import torch
import torch.nn.functional as F


class TrainingMetrics(ABC):
    """Base class for metrics with an update / reset / get_metric cycle."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def duplicate(self) -> "TrainingMetrics":
        """Independent copy with the same name and settings and an empty accumulator."""
        dup = copy.copy(self)
        dup.reset()
        return dup

    @abstractmethod
    def update(self, labels: torch.Tensor, predictions: torch.Tensor) -> torch.Tensor:
        """Add one batch to the accumulator and return the batch's own value."""

    @abstractmethod
    def reset(self) -> None:
        ...

    @abstractmethod
    def get_metric(self) -> Tuple[str, float]:
        """(name, value) over everything seen since the last reset."""

    def check_label_shapes(self, labels: torch.Tensor, predictions: torch.Tensor, check_dim_only: bool = True):
        """Raise ValueError unless labels and predictions share the batch size (or, if not `check_dim_only`, the whole shape)."""
        if labels.size(0) != predictions.size(0):
            raise ValueError(
                f"The size of labels({labels.size(0)}) does not match that of predictions({predictions.size(0)})"
            )
        if not check_dim_only and labels.shape != predictions.shape:
            raise ValueError(
                f"The shape of labels({tuple(labels.shape)}) does not match that of predictions({tuple(predictions.shape)})"
            )

    def __repr__(self):
        name, value = self.get_metric()
        return f"{type(self).__name__}(name={name!r}, value={value:.4f})"


class Accuracy(TrainingMetrics):
    """
    Classification accuracy.

    Labels are class indices, either (N,) or a (N, 1) column. Predictions
    holding several scores per label are reduced with argmax along `axis`;
    otherwise they are compared to the labels as class indices. NaN before
    the first update.
    """

    def __init__(self, name: str = "Accuracy", axis: int = 1):
        super().__init__(name)
        self.axis = axis
        self.reset()

    def reset(self):
        self.correct_instances = 0
        self.total_instances = 0

    def _flat_labels(self, labels):
        # (N, 1) column labels -> (N,)
        if labels.dim() > 1 and labels.numel() == labels.size(0):
            return labels.reshape(-1)
        return labels

    def _predicted_classes(self, labels, predictions):
        if (
            predictions.dim() > 1
            and predictions.size(self.axis) > 1
            and predictions.numel() != labels.numel()
        ):
            return predictions.argmax(dim=self.axis)
        return predictions.reshape(labels.shape)

    def update(self, labels, predictions):
        self.check_label_shapes(labels, predictions)
        labels = self._flat_labels(labels)
        pred_classes = self._predicted_classes(labels, predictions)
        correct = (pred_classes.long() == labels.long()).sum()
        self.correct_instances += int(correct.item())
        self.total_instances += labels.numel()
        return correct.float() / max(labels.numel(), 1)

    def get_metric(self):
        if self.total_instances == 0:
            return self.name, float("nan")
        return self.name, self.correct_instances / self.total_instances


class TopKAccuracy(Accuracy):
    """A prediction counts as correct when the label is among the `top_k` highest scores."""

    def __init__(self, top_k: int, name: str = None, axis: int = 1):
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")
        super().__init__(name or f"Top_{top_k}_Accuracy", axis=axis)
        self.top_k = top_k

    def update(self, labels, predictions):
        self.check_label_shapes(labels, predictions)
        labels = self._flat_labels(labels)
        k = min(self.top_k, predictions.size(self.axis))
        top = predictions.topk(k, dim=self.axis).indices
        hits = (top == labels.long().unsqueeze(self.axis)).any(dim=self.axis)
        correct = hits.sum()
        self.correct_instances += int(correct.item())
        self.total_instances += labels.numel()
        return correct.float() / max(labels.numel(), 1)


class Loss(TrainingMetrics):
    """
    Base class for losses used as metrics.

    Subclasses compute one loss value per sample; `update` returns their mean
    (still attached to the autograd graph, so it can be back-propagated) and
    `get_metric` reports the mean over every sample since the last reset
    (NaN before the first update).
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.reset()

    def reset(self):
        self.total_loss = 0.0
        self.total_instances = 0

    @abstractmethod
    def per_sample_loss(self, labels: torch.Tensor, predictions: torch.Tensor) -> torch.Tensor:
        """Loss of shape (batch,)."""

    def update(self, labels, predictions):
        self.check_label_shapes(labels, predictions)
        loss_vec = self.per_sample_loss(labels, predictions)
        self.total_loss += loss_vec.detach().sum().item()
        self.total_instances += loss_vec.numel()
        return loss_vec.mean()

    def get_metric(self):
        if self.total_instances == 0:
            return self.name, float("nan")
        return self.name, self.total_loss / self.total_instances


class L2Loss(Loss):
    """weight/2 · (prediction - label)², averaged over all but the batch axis."""

    def __init__(self, name: str = "L2Loss", weight: float = 1.0):
        super().__init__(name)
        self.weight = weight

    def per_sample_loss(self, labels, predictions):
        diff = predictions - labels.reshape(predictions.shape).to(predictions.dtype)
        loss = self.weight / 2 * diff * diff
        if loss.dim() == 1:
            return loss
        return loss.flatten(1).mean(dim=1)


class SoftmaxCrossEntropyLoss(Loss):
    """
    Cross entropy on raw scores.

    With `sparse_label` the labels are class indices of shape (batch,);
    otherwise they are per-class probabilities with the predictions' shape.
    """

    def __init__(self, name: str = "SoftmaxCrossEntropyLoss", sparse_label: bool = True):
        super().__init__(name)
        self.sparse_label = sparse_label

    def per_sample_loss(self, labels, predictions):
        if self.sparse_label:
            return F.cross_entropy(predictions, labels.long().reshape(-1), reduction='none')
        self.check_label_shapes(labels, predictions, check_dim_only=False)
        return -(labels * F.log_softmax(predictions, dim=1)).sum(dim=1)


__all__ = [
    "TrainingMetrics",
    "Accuracy",
    "TopKAccuracy",
    "Loss",
    "L2Loss",
    "SoftmaxCrossEntropyLoss",
]
