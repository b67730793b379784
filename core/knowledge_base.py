"""
Knowledge base loading.
Reads the documented processes from JSON and validates them into ProcessRecord objects.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

# JSON key -> ProcessRecord attribute
_FIELD_MAP = {
    "id": "id",
    "titulo": "title",
    "categoria": "category",
    "tags": "tags",
    "pergunta": "question",
    "resposta": "answer",
}


class KnowledgeBaseError(Exception):
    """Raised when the knowledge base cannot be read or is malformed."""


class KnowledgeBaseUnavailableError(KnowledgeBaseError):
    """Raised when a question arrives but no processes are loaded."""


@dataclass(frozen=True)
class ProcessRecord:
    """A single documented internal process."""
    id: str
    title: str
    category: str
    tags: Tuple[str, ...]
    question: str
    answer: str

    def to_dict(self) -> dict:
        """Return the record using the storage (Portuguese) keys."""
        return {
            "id": self.id,
            "titulo": self.title,
            "categoria": self.category,
            "tags": list(self.tags),
            "pergunta": self.question,
            "resposta": self.answer,
        }


def parse_record(raw: Dict, position: int) -> ProcessRecord:
    """Validate one raw JSON item and build a ProcessRecord."""
    if not isinstance(raw, dict):
        raise KnowledgeBaseError(f"Process #{position} is not an object")

    missing = [key for key in _FIELD_MAP if key not in raw]
    if missing:
        raise KnowledgeBaseError(
            f"Process #{position} is missing field(s): {', '.join(missing)}"
        )

    values = {}
    for key, attr in _FIELD_MAP.items():
        if key == "tags":
            continue
        value = raw[key]
        if not isinstance(value, str):
            raise KnowledgeBaseError(f"Process #{position}: '{key}' must be a string")
        values[attr] = value

    tags = raw["tags"]
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise KnowledgeBaseError(f"Process #{position}: 'tags' must be a list of strings")

    return ProcessRecord(tags=tuple(tags), **values)


def parse_processes(data: Dict) -> Tuple[ProcessRecord, ...]:
    """Build the corpus from a decoded {"processos": [...]} document."""
    if not isinstance(data, dict) or not isinstance(data.get("processos"), list):
        raise KnowledgeBaseError("Knowledge base must be an object with a 'processos' list")

    records: List[ProcessRecord] = []
    seen_ids = set()
    for position, raw in enumerate(data["processos"]):
        record = parse_record(raw, position)
        if record.id in seen_ids:
            raise KnowledgeBaseError(f"Duplicate process id: {record.id}")
        seen_ids.add(record.id)
        records.append(record)

    return tuple(records)


def load_processes(path: Path) -> Tuple[ProcessRecord, ...]:
    """Load and validate the knowledge base file."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise KnowledgeBaseError(f"Could not read {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Invalid JSON in {path}: {e}") from e

    records = parse_processes(data)
    logger.info("Loaded %d process(es) from %s", len(records), path.name)
    return records
