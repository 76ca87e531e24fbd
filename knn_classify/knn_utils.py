import logging
import operator
from collections import Counter
from functools import cmp_to_key

import numpy as np

logger = logging.getLogger(__name__)


class ShapeMismatch(ValueError):
    """Reference set, labels and query do not fit together."""


class DimensionMismatch(ValueError):
    """Two vectors of different length were compared."""


# 1- Distance Calculation

def euclidean_distance(x, y):
    """Euclidean distance between two equal-length vectors.

    Raises DimensionMismatch instead of broadcasting or truncating.
    """
    if len(x) != len(y):
        raise DimensionMismatch(f"cannot compare vectors of length {len(x)} and {len(y)}")

    diff = np.asarray(y, dtype=float) - np.asarray(x, dtype=float)
    return float(np.sqrt(np.sum(diff ** 2)))


# 2- Input Validation

def validate_inputs(reference_set, labels, query):
    """Check shapes before any distance is computed.

    Only the first reference vector is probed; a ragged reference set is
    caught later by euclidean_distance.
    """
    if len(reference_set) != len(labels):
        raise ShapeMismatch(
            f"{len(reference_set)} reference vectors but {len(labels)} labels")
    if len(reference_set) == 0:
        raise ShapeMismatch("reference set is empty")
    if len(query) != len(reference_set[0]):
        raise ShapeMismatch(
            f"query has {len(query)} features, reference vectors have {len(reference_set[0])}")


def _check_k(k):
    # bool is an int subclass
    if isinstance(k, bool):
        raise ValueError(f"k must be a non-negative integer, got {k!r}")
    try:
        k = operator.index(k)
    except TypeError:
        raise ValueError(f"k must be a non-negative integer, got {k!r}") from None
    if k < 0:
        raise ValueError(f"k must be a non-negative integer, got {k!r}")
    return k


# 3- Neighbor Ranking

def _compare_distances(a, b):
    # NaN compares unequal to everything: treat it as equal
    if a[1] < b[1]:
        return -1
    if a[1] > b[1]:
        return 1
    return 0


def rank_neighbors(reference_set, query):
    """Return (index, distance) pairs sorted by ascending distance.

    The sort is stable, so equal distances keep reference-set order.
    """
    distances = []
    for index, vector in enumerate(reference_set):
        distances.append((index, euclidean_distance(vector, query)))

    distances.sort(key=cmp_to_key(_compare_distances))
    return distances


# 4- Majority Vote

def majority_vote(ranked, labels, k):
    """Most frequent label among the first k ranked neighbors.

    k is clamped to len(ranked). Equal counts go to the label seen first in
    ranked order, i.e. the one owning the nearest neighbor among the tied
    labels. Returns None when no neighbor is considered.
    """
    k = min(_check_k(k), len(ranked))
    if k == 0:
        return None

    vote = Counter(labels[index] for index, _ in ranked[:k])
    # most_common keeps insertion order among equal counts
    prediction = vote.most_common(1)[0][0]
    logger.debug("k=%d tally=%s -> %r", k, dict(vote), prediction)
    return prediction


# 5- KNN Prediction

def nearest_neighbors(reference_set, labels, query, k=3):
    """The k nearest reference points as (index, distance, label) triples."""
    k = _check_k(k)
    validate_inputs(reference_set, labels, query)
    ranked = rank_neighbors(reference_set, query)
    return [(index, dist, labels[index]) for index, dist in ranked[:min(k, len(ranked))]]


def predict_knn(query, reference_set, labels, k=3):
    """Classify query by majority vote of its k nearest reference vectors.

    Returns the predicted label, or None when k is 0. Raises ShapeMismatch
    or DimensionMismatch on malformed input.
    """
    validate_inputs(reference_set, labels, query)
    ranked = rank_neighbors(reference_set, query)
    return majority_vote(ranked, labels, k)


def predict_batch(queries, reference_set, labels, k=3):
    predictions = []
    for query in queries:
        predictions.append(predict_knn(query, reference_set, labels, k=k))
    return predictions
