"""Reference CNN architectures, training metrics, and training helpers built on PyTorch."""

from . import blocks
from . import config
from . import metrics
from . import utils
from .architectures.alexnet import alexnet
from .architectures.googlenet import googlenet, inception_block
from .architectures.lenet import lenet
from .architectures.nin import nin, nin_block
from .architectures.vgg import VGG_11_ARCH, vgg, vgg_block
from .architectures.factory import build_model

__version__ = "0.1.0"

__all__ = [
    "blocks",
    "config",
    "metrics",
    "utils",
    "alexnet",
    "googlenet",
    "inception_block",
    "lenet",
    "nin",
    "nin_block",
    "VGG_11_ARCH",
    "vgg",
    "vgg_block",
    "build_model",
]
