import pytest
import torch
import torch.nn as nn
from torch.nn.parameter import UninitializedParameter

from cnn_zoo.architectures.lenet import lenet
from cnn_zoo.architectures.vgg import vgg
from cnn_zoo.utils.initialization import initialize
from cnn_zoo.utils.summary import summarize


def test_initialize_materializes_lazy_layers():
    model = lenet()
    returned = initialize(model, (1, 1, 28, 28))
    assert returned is model
    assert not any(isinstance(p, UninitializedParameter) for p in model.parameters())


@pytest.mark.parametrize("method", ["xavier", "kaiming"])
def test_initialize_zeroes_biases(method):
    model = initialize(lenet(), (1, 1, 28, 28), method=method)
    for m in model.modules():
        if isinstance(m, (nn.Conv2d, nn.Linear)) and m.bias is not None:
            assert torch.all(m.bias == 0)


def test_initialize_keeps_training_mode():
    model = lenet()
    model.train()
    initialize(model, (1, 1, 28, 28), method=None)
    assert model.training


def test_initialize_unknown_method():
    with pytest.raises(ValueError, match="Unknown init method"):
        initialize(lenet(), (1, 1, 28, 28), method="orthogonal")


def test_initialize_verbose_prints_param_count(capsys):
    initialize(lenet(), (1, 1, 28, 28), verbose=True)
    assert "61,700 parameters" in capsys.readouterr().out


def test_summarize_lenet():
    model = lenet()
    summary_df = summarize(model, (2, 1, 28, 28), verbose=False)

    assert list(summary_df.columns) == ['stage', 'layer', 'output_shape', 'num_params']
    assert len(summary_df) == len(list(model.children()))
    assert summary_df['output_shape'].iloc[0] == (2, 6, 28, 28)
    assert summary_df['output_shape'].iloc[-1] == (2, 10)
    assert summary_df['num_params'].iloc[0] == 6 * 1 * 5 * 5
    assert summary_df['num_params'].sum() == 61700


def test_summarize_vgg_blocks(capsys):
    model = vgg(conv_arch=((1, 4), (1, 8)), hidden_units=16)
    summary_df = summarize(model, (1, 3, 16, 16))
    assert summary_df['layer'].iloc[0] == "Sequential"
    assert summary_df['output_shape'].iloc[1] == (1, 8, 4, 4)
    assert "Total params" in capsys.readouterr().out
