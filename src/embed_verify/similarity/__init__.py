from .cosine import Vector, cosine_similarity, similarity_matrix

__all__ = [
    "Vector",
    "cosine_similarity",
    "similarity_matrix",
]
