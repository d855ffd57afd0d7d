import os

import pytest

from tallykit.plotting import plot_frequency_distribution


def test_plot_numeric_distribution(tmp_path):
    out = plot_frequency_distribution([3, 1, 2, 2, 3, 3], output_dir=str(tmp_path))
    assert out.endswith("frequency_distribution.png")
    assert os.path.exists(out)


def test_plot_string_distribution(tmp_path):
    words = "the best of the best".split()
    out = plot_frequency_distribution(words, output_dir=str(tmp_path), filename="words.png")
    assert os.path.exists(out)


def test_plot_mixed_keys_keeps_insertion_order(tmp_path):
    out = plot_frequency_distribution([1, "a", 1], output_dir=str(tmp_path))
    assert os.path.exists(out)


def test_plot_empty_raises(tmp_path):
    with pytest.raises(ValueError):
        plot_frequency_distribution([], output_dir=str(tmp_path))
