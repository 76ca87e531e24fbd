"""
Unit tests for normalization and reference-set persistence.
"""

import numpy as np
import pytest

from knn_classify.utils import apply_normalization, load_data, normalize_features, save_data


class TestNormalization:

    def test_range_is_unit(self):
        X = np.array([[0.0, 10.0], [5.0, 20.0], [10.0, 30.0]])
        X_norm, min_vals, max_vals = normalize_features(X)
        np.testing.assert_allclose(X_norm[:, 0], [0.0, 0.5, 1.0])
        np.testing.assert_allclose(X_norm[:, 1], [0.0, 0.5, 1.0])
        np.testing.assert_array_equal(min_vals, [0.0, 10.0])
        np.testing.assert_array_equal(max_vals, [10.0, 30.0])

    def test_constant_column(self):
        X = np.array([[2.0, 1.0], [2.0, 3.0]])
        X_norm, _, _ = normalize_features(X)
        np.testing.assert_array_equal(X_norm[:, 0], [0.0, 0.0])

    def test_apply_matches_fit(self):
        X = np.array([[1.0, 4.0], [3.0, 8.0], [2.0, 6.0]])
        X_norm, min_vals, max_vals = normalize_features(X)
        np.testing.assert_allclose(apply_normalization(X[2], min_vals, max_vals), X_norm[2])

    def test_apply_does_not_mutate(self):
        min_vals = np.array([1.0, 1.0])
        max_vals = np.array([1.0, 3.0])
        apply_normalization([2.0, 2.0], min_vals, max_vals)
        np.testing.assert_array_equal(max_vals, [1.0, 3.0])


class TestDataManagement:

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "ref.npz"
        X = np.array([[1.0, 2.0], [3.0, 4.0]])
        save_data(path, X, [0, 1], min_vals=[1.0, 2.0], max_vals=[3.0, 4.0])
        features, labels, min_vals, max_vals = load_data(path)
        np.testing.assert_array_equal(features, X)
        np.testing.assert_array_equal(labels, [0, 1])
        np.testing.assert_array_equal(min_vals, [1.0, 2.0])
        np.testing.assert_array_equal(max_vals, [3.0, 4.0])

    def test_without_scaling(self, tmp_path):
        path = tmp_path / "ref.npz"
        save_data(path, [[1.0]], ["a"])
        _, labels, min_vals, max_vals = load_data(path)
        assert list(labels) == ["a"]
        assert min_vals is None
        assert max_vals is None

    def test_missing_keys(self, tmp_path):
        path = tmp_path / "bad.npz"
        np.savez(path, something=np.zeros(3))
        with pytest.raises(KeyError):
            load_data(path)
