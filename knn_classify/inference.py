import argparse
import logging
import sys

import matplotlib.pyplot as plt

from knn_classify.knn_utils import DimensionMismatch, ShapeMismatch, predict_batch
from knn_classify.metrics import display_metrics
from knn_classify.utils import apply_normalization, load_data, normalize_features

# ============== CONFIGURATION ==============
K = 3
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
NO_PREDICTION = "-"

logger = logging.getLogger(__name__)


def plot_confusion(conf, classes):
    fig, ax = plt.subplots(figsize=(6, 5))
    ax.imshow(conf, cmap="Blues")
    ax.set_xticks(range(len(classes)))
    ax.set_yticks(range(len(classes)))
    ax.set_xticklabels([str(c) for c in classes])
    ax.set_yticklabels([str(c) for c in classes])
    for i in range(len(classes)):
        for j in range(len(classes)):
            ax.text(j, i, str(conf[i][j]), ha="center", va="center")
    ax.set_xlabel("Predicted")
    ax.set_ylabel("True")
    ax.set_title("Confusion Matrix")
    plt.show()
    plt.close(fig)
    return fig


def inference(reference_path, queries_path, k=K, normalize=False, plot=False):
    """
    Classify every vector of the query archive against the reference archive.
    Prints one prediction per line, then metrics when query labels are present.
    Returns the list of predictions.
    """

    # ============== 1. Load reference data ==============
    X_ref, y_ref, min_vals, max_vals = load_data(reference_path)
    X_query, y_query, _, _ = load_data(queries_path)
    print(f"Reference data loaded: X={X_ref.shape}, y={y_ref.shape}")
    print(f"Queries loaded: X={X_query.shape}, k={k}\n")

    # ============== 2. Normalization ==============
    if normalize:
        # stored scaling describes the raw reference features
        if min_vals is None:
            X_ref, min_vals, max_vals = normalize_features(X_ref)
        else:
            X_ref = [apply_normalization(r, min_vals, max_vals) for r in X_ref]
        X_query = [apply_normalization(q, min_vals, max_vals) for q in X_query]

    # ============== 3. Prediction ==============
    predictions = predict_batch(X_query, X_ref, list(y_ref), k=k)

    for i, pred in enumerate(predictions):
        shown = NO_PREDICTION if pred is None else pred
        print(f"  [{i:>4}] Predicted: {shown}")

    # ============== 4. Metrics ==============
    if len(y_query) == len(predictions) and len(y_query) > 0:
        conf, classes = display_metrics(list(y_query), predictions)
        if plot:
            plot_confusion(conf, classes)

    return predictions


def main(argv=None):
    parser = argparse.ArgumentParser(description="k-nearest-neighbors classification")
    parser.add_argument("--reference", required=True, help="Labeled reference set (.npz)")
    parser.add_argument("--queries", required=True, help="Query vectors (.npz)")
    parser.add_argument("--k", type=int, default=K, help="Number of neighbors")
    parser.add_argument("--normalize", action="store_true",
                        help="Min-Max scale reference and queries")
    parser.add_argument("--plot", action="store_true", help="Show the confusion matrix")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.k < 0:
        parser.error("--k must be non-negative")

    try:
        inference(args.reference, args.queries, k=args.k,
                  normalize=args.normalize, plot=args.plot)
    except (ShapeMismatch, DimensionMismatch) as e:
        logger.error("Classification failed: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
