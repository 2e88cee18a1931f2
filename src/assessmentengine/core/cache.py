"""Optional memoization of assessment evaluations.

Entries are keyed by a SHA-256 fingerprint of the assessment schema and
the response snapshot, so an edited response map always misses. Results
must be treated as read-only by callers.
"""

from __future__ import annotations

import hashlib
import json
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from ..schemas import Assessment
from .results import AssessmentEvaluation


def _json_fallback(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return repr(value)


def fingerprint(assessment: Assessment, responses: Mapping[str, Any]) -> str:
    """Structural hash of an (assessment, responses) pair."""
    schema = assessment.model_dump(mode="json", by_alias=True)
    try:
        encoded = json.dumps(
            {"assessment": schema, "responses": dict(responses)},
            sort_keys=True,
            default=_json_fallback,
        )
    except (TypeError, ValueError):
        encoded = json.dumps(schema, sort_keys=True) + repr(sorted(responses.items(), key=repr))
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


class EvaluationCache:
    """Bounded LRU of evaluations keyed by :func:`fingerprint`."""

    def __init__(self, max_entries: int = 256) -> None:
        self._max_entries = max(1, max_entries)
        self._entries: OrderedDict[str, AssessmentEvaluation] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> AssessmentEvaluation | None:
        evaluation = self._entries.get(key)
        if evaluation is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return evaluation

    def put(self, key: str, evaluation: AssessmentEvaluation) -> None:
        self._entries[key] = evaluation
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
