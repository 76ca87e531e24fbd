import logging

import numpy as np

logger = logging.getLogger(__name__)


# 1- Normalization Functions

def normalize_features(X):
    """Min-Max normalization. Returns normalized X, min_vals, max_vals."""
    X = np.asarray(X, dtype=float)
    min_vals = np.min(X, axis=0)
    max_vals = np.max(X, axis=0)
    range_vals = max_vals - min_vals
    range_vals[range_vals == 0] = 1  # constant column
    X_norm = (X - min_vals) / range_vals
    return X_norm, min_vals, max_vals


def apply_normalization(features, min_vals, max_vals):
    """Apply pre-computed Min-Max normalization to a single feature vector."""
    range_vals = np.asarray(max_vals, dtype=float) - np.asarray(min_vals, dtype=float)
    range_vals[range_vals == 0] = 1
    return (np.asarray(features, dtype=float) - min_vals) / range_vals


# 2- Data Management Functions

def save_data(filename, features, labels, min_vals=None, max_vals=None):
    arrays = {"features": np.asarray(features), "labels": np.asarray(labels)}
    if min_vals is not None and max_vals is not None:
        arrays["min_vals"] = np.asarray(min_vals)
        arrays["max_vals"] = np.asarray(max_vals)
    np.savez(filename, **arrays)
    logger.info("Saved %d vectors to %s", len(arrays["features"]), filename)


def load_data(filename):
    """Load a reference set written by save_data.

    Returns features, labels, min_vals, max_vals; the last two are None when
    the archive holds no scaling parameters.
    """
    with np.load(filename) as data:
        missing = [key for key in ("features", "labels") if key not in data.files]
        if missing:
            logger.error("%s is missing %s", filename, ", ".join(missing))
            raise KeyError(f"{filename} is missing {', '.join(missing)}")
        features = data["features"]
        labels = data["labels"]
        min_vals = data["min_vals"] if "min_vals" in data.files else None
        max_vals = data["max_vals"] if "max_vals" in data.files else None
    logger.info("Loaded %s: features=%s, labels=%s", filename, features.shape, labels.shape)
    return features, labels, min_vals, max_vals
