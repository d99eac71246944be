import pytest
import torch
import torch.nn as nn

from cnn_zoo.architectures.alexnet import alexnet
from cnn_zoo.architectures.googlenet import googlenet, inception_block
from cnn_zoo.architectures.lenet import lenet
from cnn_zoo.architectures.nin import nin, nin_block
from cnn_zoo.architectures.vgg import VGG_11_ARCH, vgg, vgg_block
from cnn_zoo.blocks import compose


def _count_param_layers(model):
    return sum(isinstance(m, (nn.Conv2d, nn.Linear)) for m in model.modules())


def test_lenet_shape():
    """LeNet maps MNIST-sized inputs to class scores."""
    model = lenet()
    x = torch.randn(2, 1, 28, 28)
    out = model(x)
    assert out.shape == (2, 10)


def test_lenet_first_conv_has_no_bias():
    model = lenet()
    model(torch.randn(1, 1, 28, 28))
    first_conv = model[0]
    assert isinstance(first_conv, nn.Conv2d)
    assert first_conv.bias is None
    assert first_conv.weight.shape == (6, 1, 5, 5)


def test_alexnet_shape():
    """Smaller dense width keeps the test light; the conv stack is the real one."""
    model = alexnet(hidden_units=64)
    x = torch.randn(2, 1, 224, 224)
    out = model(x)
    assert out.shape == (2, 10)
    assert _count_param_layers(model) == 8


@pytest.mark.parametrize("conv_arch", [
    ((1, 8),),
    ((1, 8), (2, 16)),
    ((2, 4), (1, 8), (3, 8)),
    VGG_11_ARCH,
])
def test_vgg_param_layer_count(conv_arch):
    """Convolutions plus the three dense layers, counted before any parameters are allocated."""
    model = vgg(conv_arch=conv_arch)
    expected = sum(num_convs for num_convs, _ in conv_arch) + 3
    assert _count_param_layers(model) == expected


def test_vgg_shape_small_arch():
    model = vgg(conv_arch=((1, 8), (2, 16)), num_classes=5, hidden_units=32)
    x = torch.randn(2, 3, 32, 32)
    out = model(x)
    assert out.shape == (2, 5)
    # one child per conv block, then flatten + 7 dense-part layers
    assert len(list(model.children())) == 2 + 8


def test_vgg_block_halves_resolution():
    block = compose(vgg_block(num_convs=2, num_channels=16))
    out = block(torch.randn(1, 3, 32, 32))
    assert out.shape == (1, 16, 16, 16)


def test_nin_shape():
    model = nin()
    x = torch.randn(2, 1, 224, 224)
    out = model(x)
    assert out.shape == (2, 10)


def test_nin_block_shape():
    block = compose(nin_block(32, kernel=5, stride=1, padding=2))
    out = block(torch.randn(2, 3, 20, 20))
    assert out.shape == (2, 32, 20, 20)
    assert _count_param_layers(block) == 3


def test_googlenet_shape():
    model = googlenet()
    x = torch.randn(2, 1, 96, 96)
    out = model(x)
    assert out.shape == (2, 10)
    # five stages and the classifier
    assert len(list(model.children())) == 6


def test_inception_block_concatenates_channels():
    block = compose([inception_block(64, (96, 128), (16, 32), 32)])
    out = block(torch.randn(2, 3, 12, 12))
    assert out.shape == (2, 64 + 128 + 32 + 32, 12, 12)


def test_incompatible_input_fails_at_first_forward():
    """Nothing checks shapes at construction; a too-small input only fails when executed."""
    model = lenet()
    with pytest.raises(RuntimeError):
        model(torch.randn(1, 1, 4, 4))
