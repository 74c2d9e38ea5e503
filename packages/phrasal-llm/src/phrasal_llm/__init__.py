"""Generation endpoint client for phrasal."""

from phrasal_llm.generation import GenerationClient

__all__ = ["GenerationClient"]
