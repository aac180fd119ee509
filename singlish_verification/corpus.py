import json
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from singlish_verification.errors import CorpusIntegrityError

DEFAULT_CORPUS_PATH = os.path.join(os.path.dirname(__file__), "data", "corpus.json")

CATEGORIES = ("positive", "negative")
LENGTH_CLASSES = ("S", "M", "L")
REQUIRED_FIELDS = ("id", "name", "category", "lengthClass", "input", "expected")


@dataclass(frozen=True)
class CorpusRecord:
    id: str
    name: str
    category: str
    length_class: str
    input: str
    expected: str

    @property
    def label(self) -> str:
        return f"{self.id} - {self.name}"


def _parse_record(position: int, raw) -> CorpusRecord:
    if not isinstance(raw, dict):
        raise CorpusIntegrityError(f"Record #{position} is not an object")
    missing = [name for name in REQUIRED_FIELDS if name not in raw]
    if missing:
        raise CorpusIntegrityError(f"Record #{position} is missing {', '.join(missing)}")
    for name in REQUIRED_FIELDS:
        if not isinstance(raw[name], str):
            raise CorpusIntegrityError(f"Record #{position} field {name!r} must be a string")
    if not raw["id"].strip():
        raise CorpusIntegrityError(f"Record #{position} has a blank id")
    if raw["category"] not in CATEGORIES:
        raise CorpusIntegrityError(
            f"Record {raw['id']} has category {raw['category']!r}, expected one of {CATEGORIES}")
    if raw["lengthClass"] not in LENGTH_CLASSES:
        raise CorpusIntegrityError(
            f"Record {raw['id']} has lengthClass {raw['lengthClass']!r}, expected one of {LENGTH_CLASSES}")
    return CorpusRecord(
        id=raw["id"],
        name=raw["name"],
        category=raw["category"],
        length_class=raw["lengthClass"],
        input=raw["input"],
        expected=raw["expected"],
    )


def parse_corpus(raw_records) -> List[CorpusRecord]:
    """
    Validates decoded corpus JSON and turns it into records.

    Args:
        raw_records: A list of dicts with id, name, category, lengthClass,
            input and expected.

    Returns:
        Records in corpus order.

    Raises:
        CorpusIntegrityError: On a malformed record or a duplicate id.
    """
    if not isinstance(raw_records, list):
        raise CorpusIntegrityError("Corpus must be a JSON array of records")
    records = []
    seen = set()
    for position, raw in enumerate(raw_records):
        record = _parse_record(position, raw)
        if record.id in seen:
            raise CorpusIntegrityError(f"Duplicate test case id {record.id}")
        seen.add(record.id)
        records.append(record)
    return records


def load_corpus(path: Optional[str] = None) -> List[CorpusRecord]:
    """
    Loads and validates the phrase table.

    Args:
        path: JSON file to read. Defaults to the bundled data/corpus.json.

    Returns:
        Records in corpus order.
    """
    path = path or DEFAULT_CORPUS_PATH
    try:
        with open(path, encoding="utf-8") as f:
            raw_records = json.load(f)
    except OSError as e:
        raise CorpusIntegrityError(f"Cannot read corpus {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CorpusIntegrityError(f"Corpus {path} is not valid JSON: {e}") from e
    return parse_corpus(raw_records)


def select(records: Iterable[CorpusRecord], ids: Optional[Iterable[str]] = None,
           category: Optional[str] = None) -> List[CorpusRecord]:
    """Filters records by id and/or category, keeping corpus order."""
    wanted = set(ids) if ids else None
    return [
        record for record in records
        if (wanted is None or record.id in wanted)
        and (category is None or record.category == category)
    ]
