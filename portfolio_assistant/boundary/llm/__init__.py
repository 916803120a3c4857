"""
Language model boundary.

Exports:
  - QueryEmbedder: Text to vector via OpenAI embeddings
  - ChatModelClient: Streaming and one-shot chat completions via OpenAI
"""

from portfolio_assistant.boundary.llm.chat_model import ChatModelClient
from portfolio_assistant.boundary.llm.embeddings import QueryEmbedder

__all__ = ["ChatModelClient", "QueryEmbedder"]
