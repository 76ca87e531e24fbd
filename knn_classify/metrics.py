import numpy as np


# 1- Accuracy
def accuracy(true_labels, predicted_labels):
    correct = sum(1 for t, p in zip(true_labels, predicted_labels) if p is not None and t == p)
    total = len(true_labels)
    ratio = correct / total if total > 0 else 0
    return correct, total, ratio


def _class_order(labels):
    seen = list(dict.fromkeys(labels))
    try:
        return sorted(seen)
    except TypeError:
        # mixed label types keep first-seen order
        return seen


# 2- Confusion matrix
def confusion_matrix(true_labels, predicted_labels, classes=None):
    """Rows are true classes, columns predicted classes.

    Missing predictions (None) are not counted in any column.
    """
    if classes is None:
        observed = list(true_labels) + [p for p in predicted_labels if p is not None]
        classes = _class_order(observed)
    position = {c: i for i, c in enumerate(classes)}
    matrix = np.zeros((len(classes), len(classes)), dtype=int)
    for t, p in zip(true_labels, predicted_labels):
        if p is None:
            continue
        matrix[position[t]][position[p]] += 1
    return matrix, classes


# 3- Precision per class
def precision_per_class(conf_matrix):
    num_classes = conf_matrix.shape[0]
    precisions = []
    for c in range(num_classes):
        tp = conf_matrix[c][c]
        fp = np.sum(conf_matrix[:, c]) - tp
        precision = tp / (tp + fp) if (tp + fp) > 0 else 0
        precisions.append(precision)
    return precisions


# 4- Recall per class
def recall_per_class(conf_matrix):
    num_classes = conf_matrix.shape[0]
    recalls = []
    for c in range(num_classes):
        tp = conf_matrix[c][c]
        fn = np.sum(conf_matrix[c, :]) - tp
        recall = tp / (tp + fn) if (tp + fn) > 0 else 0
        recalls.append(recall)
    return recalls


# 5- Display all metrics
def display_metrics(true_labels, predicted_labels):
    correct, total, acc = accuracy(true_labels, predicted_labels)
    undecided = sum(1 for p in predicted_labels if p is None)

    print(f"\n{'='*50}")
    print("METRICS")
    print(f"{'='*50}")
    print(f"Accuracy:        {correct}/{total} = {acc*100:.1f}%")
    print(f"No prediction:   {undecided}")

    conf, classes = confusion_matrix(true_labels, predicted_labels)
    names = [str(c) for c in classes]
    width = max([len(n) for n in names] + [3])
    print("\nConfusion Matrix:")
    print(f"  {'':>{width}}   " + " ".join(f"{n:>{width}}" for n in names))
    print(f"  {'':>{width}}   " + "-" * ((width + 1) * len(names)))
    for i, name in enumerate(names):
        row = " ".join(f"{conf[i][j]:>{width}d}" for j in range(len(names)))
        print(f"  {name:>{width}} | {row}")

    print("\nPrecision per class:")
    for name, p in zip(names, precision_per_class(conf)):
        print(f"  Class {name}: {p*100:.1f}%")

    print("\nRecall per class:")
    for name, r in zip(names, recall_per_class(conf)):
        print(f"  Class {name}: {r*100:.1f}%")

    print(f"{'='*50}")
    return conf, classes
