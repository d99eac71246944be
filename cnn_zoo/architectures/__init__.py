"""Reference CNN architectures composed from layer configs."""

from . import alexnet
from . import googlenet
from . import lenet
from . import nin
from . import vgg

__all__ = [
    "alexnet",
    "googlenet",
    "lenet",
    "nin",
    "vgg",
]
