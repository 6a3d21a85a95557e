from .tfidf import tfidf_similarity

__all__ = ["tfidf_similarity"]
