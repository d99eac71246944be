import torch
import torch.nn as nn

import cnn_zoo


def test_top_level_factories_are_callable():
    model = cnn_zoo.lenet()
    assert isinstance(model, nn.Sequential)
    assert model(torch.randn(2, 1, 28, 28)).shape == (2, 10)


def test_top_level_exports():
    for name in ["alexnet", "googlenet", "lenet", "nin", "vgg",
                 "vgg_block", "nin_block", "inception_block", "build_model"]:
        assert callable(getattr(cnn_zoo, name)), name
    assert cnn_zoo.VGG_11_ARCH[0] == (1, 64)
    assert set(cnn_zoo.__all__) >= {"lenet", "vgg", "build_model"}


def test_top_level_vgg_block_composes():
    block = cnn_zoo.blocks.compose(cnn_zoo.vgg_block(1, 4))
    assert block(torch.randn(1, 3, 8, 8)).shape == (1, 4, 4, 4)
