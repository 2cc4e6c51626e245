# Role: Result of grading one email submission. Surfaced verbatim to the user as an itemized list.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class EmailFeedback:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "missing_keywords": list(self.missing_keywords),
        }
