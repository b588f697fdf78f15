"""
Language-specific code generators.

Go is the only target language.
"""

from .go import GoGenerator

__all__ = ["GoGenerator"]
