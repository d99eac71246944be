import sys
from pathlib import Path
import pytest
import torch

# Add project root to sys.path so tests can import 'cnn_zoo' without installing it
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from cnn_zoo.config import DataMetadata


@pytest.fixture(autouse=True)
def _seed():
    torch.manual_seed(0)


@pytest.fixture
def fashion_mnist_meta():
    """Metadata for a 10-class single-channel dataset with 28x28 images."""
    return DataMetadata(
        dataset_key="fashion_mnist",
        num_classes=10,
        input_channels=1,
        input_size=28
    )


@pytest.fixture
def logits_and_labels():
    """Batch of 4 score rows over 3 classes; rows 0, 1, 3 predict their label, row 2 has it second."""
    logits = torch.tensor([
        [2.0, 0.1, 0.3],
        [0.2, 3.0, 0.1],
        [0.9, 0.8, 0.1],
        [0.0, 0.2, 1.5],
    ])
    labels = torch.tensor([0, 1, 1, 2])
    return logits, labels
