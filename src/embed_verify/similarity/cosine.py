# src/embed_verify/similarity/cosine.py

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from embed_verify.exceptions import DimensionMismatchError

Vector = Sequence[float] | np.ndarray


def cosine_similarity(a: Vector, b: Vector) -> float:
    """Cosine similarity between two equal-length vectors.

    Works on any float sequence: lists, tuples or numpy arrays of any
    floating dtype. Arithmetic happens in the inputs' common floating dtype
    (float64 for plain Python sequences, float32 stays float32), so results
    carry that dtype's rounding; the value is returned as a Python float.

    Returns 0.0 when either vector has zero magnitude. Components are
    rescaled before the dot products, so huge or tiny magnitudes do not
    overflow or underflow.

    Raises:
        DimensionMismatchError: If the vectors differ in length.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))

    va = _as_float_array(a)
    vb = _as_float_array(b)

    scale_a = np.max(np.abs(va), initial=0)
    scale_b = np.max(np.abs(vb), initial=0)
    if scale_a == 0 or scale_b == 0:
        return 0.0

    # Unit max-norm keeps the dot products finite.
    va = va / scale_a
    vb = vb / scale_b

    dot = np.dot(va, vb)
    magnitude_a = np.sqrt(np.dot(va, va))
    magnitude_b = np.sqrt(np.dot(vb, vb))

    return float(dot / (magnitude_a * magnitude_b))


def similarity_matrix(rows: Sequence[Vector], cols: Sequence[Vector]) -> list[list[float]]:
    """Pairwise cosine similarities, ``result[i][j] = cos(rows[i], cols[j])``."""
    return [[cosine_similarity(r, c) for c in cols] for r in rows]


def _as_float_array(v: Vector) -> npt.NDArray[np.floating]:
    arr = np.asarray(v)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr
