"""DTOs passed from the HTTP layer into practice use cases."""

from collections.abc import Sequence
from dataclasses import dataclass

from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.practice.entities.word_entry import WordEntry


@dataclass
class WordEntryData:
    """Raw entry as typed by the learner; validated when converted."""

    word: str
    meaning: str
    sentence: str
    description: str


def to_word_entries(entries: Sequence[WordEntryData]) -> list[WordEntry]:
    """
    Convert raw entries to value objects.

    Raises:
        ValidationError: On the first entry with a blank field, naming its position
    """
    result: list[WordEntry] = []
    for index, data in enumerate(entries, start=1):
        try:
            result.append(
                WordEntry(
                    word=data.word,
                    meaning=data.meaning,
                    sentence=data.sentence,
                    description=data.description,
                )
            )
        except ValidationError as e:
            raise ValidationError(
                f"Entry {index}: {e.message}", field=f"entries[{index - 1}].{e.field}"
            ) from e
    return result
