"""In-memory record store for student records."""

from __future__ import annotations

import logging
import math
import re
import threading
from typing import Any, Dict, List, Mapping, Optional

_LOGGER = logging.getLogger("student_api.store")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
# 0x/0o/0b literals count as numbers too, unsigned like JavaScript's Number()
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def parse_identifier(raw: Any) -> Optional[int]:
    """Turn a caller-supplied identifier into the integer it denotes.

    Path parameters arrive as strings, so `"1"`, `"01"`, `" 1 "`, `"1.0"`
    and `"0x1"` all denote record 1. Anything that is not an integral
    number returns `None` and therefore never matches a stored record.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) and raw.is_integer() else None
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if _INT_RE.match(text):
        try:
            return int(text)
        except ValueError:
            # longer than the interpreter's int conversion limit
            return None
    if _PREFIXED_RE.match(text):
        return int(text, 0)
    if not text or "_" in text or not text.isascii():
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return None


class StudentStore:
    """Insertion-ordered collection of records keyed by an auto-assigned id.

    Ids start at 1 and are never reused, even after deletion. All access
    goes through a single lock so the store can be shared by the thread
    pool that runs sync route handlers.
    """

    def __init__(self):
        self._records: List[Dict[str, Any]] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Assign the next id to `fields` and append the new record."""
        with self._lock:
            record = _with_id(self._next_id, fields)
            self._next_id += 1
            self._records.append(record)
        _LOGGER.debug("student created id=%s", record["id"])
        return dict(record)

    def list_all(self) -> List[Dict[str, Any]]:
        """Return a snapshot of every record in creation order."""
        with self._lock:
            return [dict(r) for r in self._records]

    def find_by_id(self, identifier: Any) -> Optional[Dict[str, Any]]:
        """Return the record matching `identifier` or `None`."""
        student_id = parse_identifier(identifier)
        if student_id is None:
            return None
        with self._lock:
            for record in self._records:
                if record["id"] == student_id:
                    return dict(record)
        return None

    def update(self, identifier: Any, fields: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Replace the whole record matching `identifier`.

        Fields missing from `fields` are dropped; the id is kept. Returns
        `None` when nothing matches.
        """
        student_id = parse_identifier(identifier)
        if student_id is None:
            return None
        with self._lock:
            for idx, record in enumerate(self._records):
                if record["id"] == student_id:
                    replaced = _with_id(student_id, fields)
                    self._records[idx] = replaced
                    break
            else:
                return None
        _LOGGER.debug("student replaced id=%s", student_id)
        return dict(replaced)

    def delete(self, identifier: Any) -> int:
        """Remove every record matching `identifier` and return how many went."""
        student_id = parse_identifier(identifier)
        if student_id is None:
            return 0
        with self._lock:
            before = len(self._records)
            self._records = [r for r in self._records if r["id"] != student_id]
            removed = before - len(self._records)
        if removed:
            _LOGGER.debug("student deleted id=%s", student_id)
        return removed


def _with_id(student_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
    # id goes first and always wins over a caller-supplied one
    record: Dict[str, Any] = {"id": student_id}
    record.update((k, v) for k, v in fields.items() if k != "id")
    return record
