"""Tests for the tab-separated data files."""

import numpy as np
import pytest

from regressionAPP.core.dataset import Dataset, generate_dataset
from regressionAPP.core.errors import InvalidConfigurationError
from regressionAPP.core.persistence import (
    DATASET_FILENAME,
    FIT_FILENAME,
    load_dataset,
    save_dataset,
    save_fit,
)


def test_dataset_file_layout(tmp_path):
    ds = Dataset(x=[0.0, 1.5, 2.97], y=[9.0, 12.25, 14.94])
    path = tmp_path / DATASET_FILENAME

    save_dataset(path, ds)

    lines = path.read_text().splitlines()
    assert len(lines) == 3
    assert lines[1].split("\t") == ["1.5", "12.25"]


def test_saved_dataset_loads_back(tmp_path):
    ds = generate_dataset(64, rng=11)
    path = tmp_path / DATASET_FILENAME

    save_dataset(path, ds)
    loaded = load_dataset(path, learning_rate=0.3)

    np.testing.assert_array_equal(loaded.x, ds.x)
    np.testing.assert_array_equal(loaded.y, ds.y)
    assert loaded.learning_rate == 0.3


def test_fit_file_holds_predictions(tmp_path):
    ds = Dataset(x=[0.0, 1.0, 2.0], y=[0.0, 0.0, 0.0])
    path = tmp_path / FIT_FILENAME

    save_fit(path, ds, np.array([9.5, 2.0]))

    data = np.loadtxt(path, delimiter="\t")
    np.testing.assert_allclose(data[:, 0], [0.0, 1.0, 2.0])
    np.testing.assert_allclose(data[:, 1], [9.5, 11.5, 13.5])


def test_single_row_file_loads(tmp_path):
    path = tmp_path / "one.dat"
    path.write_text("1.0\t3.0\n")

    ds = load_dataset(path)

    assert ds.size == 1


def test_wrong_column_count_rejected(tmp_path):
    path = tmp_path / "bad.dat"
    path.write_text("1.0\t2.0\t3.0\n4.0\t5.0\t6.0\n")

    with pytest.raises(InvalidConfigurationError):
        load_dataset(path)
