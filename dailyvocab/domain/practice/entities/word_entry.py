"""
WordEntry value object: one vocabulary item inside a daily submission.
"""

from dataclasses import dataclass, fields
from typing import Any

from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class WordEntry(ValueObject):
    """
    A single vocabulary entry.

    Business Rules:
    - word, meaning, sentence and description are all required
    - Whitespace-only text counts as empty
    - Values are stored trimmed
    """

    word: str
    meaning: str
    sentence: str
    description: str

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(
                    f"{f.name.capitalize()} cannot be empty", field=f.name, value=value
                )
            object.__setattr__(self, f.name, value.strip())

    def to_primitive(self) -> dict[str, str]:
        return {
            "word": self.word,
            "meaning": self.meaning,
            "sentence": self.sentence,
            "description": self.description,
        }

    @classmethod
    def from_primitive(cls, data: dict[str, Any]) -> "WordEntry":
        return cls(
            word=data.get("word", ""),
            meaning=data.get("meaning", ""),
            sentence=data.get("sentence", ""),
            description=data.get("description", ""),
        )
