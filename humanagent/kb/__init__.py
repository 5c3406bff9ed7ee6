"""Knowledge base module: curated entries about the human being.

The knowledge base is loaded once at startup from YAML and is read-only
afterwards. Entry order matters for tie-breaking in the matching engine.
"""

from .knowledge_base import KnowledgeBase, KnowledgeBaseError
from .loader import BUNDLED_KNOWLEDGE_PATH, load_knowledge_base, parse_entries

__all__ = [
    "KnowledgeBase",
    "KnowledgeBaseError",
    "BUNDLED_KNOWLEDGE_PATH",
    "load_knowledge_base",
    "parse_entries",
]
