"""Outbound HTTP clients."""

from referent.clients.fetcher import ArticleFetcher
from referent.clients.huggingface import GeneratedImage, HuggingFaceImageClient
from referent.clients.openrouter import OpenRouterClient

__all__ = ["ArticleFetcher", "GeneratedImage", "HuggingFaceImageClient", "OpenRouterClient"]
