"""Load the knowledge base from YAML at startup."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..core.models.knowledge import KnowledgeEntry
from ..observability.logger import get_logger
from .knowledge_base import KnowledgeBase, KnowledgeBaseError

logger = get_logger(__name__)

BUNDLED_KNOWLEDGE_PATH = Path(__file__).parent / "data" / "human_knowledge.yaml"


def load_knowledge_base(path: str | Path | None = None) -> KnowledgeBase:
    """Load and validate a knowledge file.

    Expected YAML structure::

        entries:
          - id: immunsystem
            category: Biologie
            title: Das Immunsystem
            keywords: [immunsystem, antikörper]
            answer: ...
            details: [...]
            follow_up: [...]

    Args:
        path: Knowledge file; the bundled German knowledge base when None

    Returns:
        KnowledgeBase in file order

    Raises:
        KnowledgeBaseError: If the file is missing, unparsable or invalid
    """
    source = Path(path) if path else BUNDLED_KNOWLEDGE_PATH

    if not source.is_file():
        raise KnowledgeBaseError(f"Knowledge file not found: {source}")

    try:
        with open(source, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise KnowledgeBaseError(f"Cannot parse knowledge file {source}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise KnowledgeBaseError(f"Cannot read knowledge file {source}: {e}") from e

    knowledge_base = parse_entries(data, source=str(source))

    logger.info(
        "knowledge_base_loaded",
        source=str(source),
        entries=len(knowledge_base),
        categories=knowledge_base.categories(),
    )
    return knowledge_base


def parse_entries(data: Any, source: str = "<memory>") -> KnowledgeBase:
    """Validate raw knowledge data into a KnowledgeBase.

    Args:
        data: Mapping with an ``entries`` list, or the list itself
        source: Name used in error messages

    Returns:
        KnowledgeBase

    Raises:
        KnowledgeBaseError: If the data does not have the expected shape
    """
    raw_entries = data.get("entries") if isinstance(data, dict) else data
    if not isinstance(raw_entries, list) or not raw_entries:
        raise KnowledgeBaseError(f"{source}: expected a non-empty 'entries' list")

    entries: list[KnowledgeEntry] = []
    for index, raw in enumerate(raw_entries):
        try:
            entries.append(KnowledgeEntry.model_validate(raw))
        except ValidationError as e:
            label = raw.get("id", index) if isinstance(raw, dict) else index
            raise KnowledgeBaseError(f"{source}: invalid entry {label}: {e}") from e

    return KnowledgeBase(entries)
