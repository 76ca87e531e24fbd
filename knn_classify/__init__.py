from knn_classify.knn_utils import (
    DimensionMismatch,
    ShapeMismatch,
    euclidean_distance,
    majority_vote,
    nearest_neighbors,
    predict_batch,
    predict_knn,
    rank_neighbors,
    validate_inputs,
)

__all__ = [
    'DimensionMismatch',
    'ShapeMismatch',
    'euclidean_distance',
    'majority_vote',
    'nearest_neighbors',
    'predict_batch',
    'predict_knn',
    'rank_neighbors',
    'validate_inputs',
]
