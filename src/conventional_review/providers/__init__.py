# src/conventional_review/providers/__init__.py
from .base import LLMProvider
from .openai import OpenAIProvider

__all__ = ["LLMProvider", "OpenAIProvider"]
