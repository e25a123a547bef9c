from .ids import SubmissionId, UserId

__all__ = [
    "SubmissionId",
    "UserId",
]
