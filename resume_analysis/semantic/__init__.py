from .similarity import normalized_similarity, is_fuzzy_match

__all__ = ["normalized_similarity", "is_fuzzy_match"]
