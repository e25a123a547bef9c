from .submission import ReviewState, Submission
from .word_entry import WordEntry

__all__ = ["ReviewState", "Submission", "WordEntry"]
