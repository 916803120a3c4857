"""
Similarity store boundary.

Exports:
  - SimilarityStore: Client for the server-side hybrid_search and
    get_content_by_id SQL functions
"""

from portfolio_assistant.boundary.vdb.similarity_store import SimilarityStore

__all__ = ["SimilarityStore"]
