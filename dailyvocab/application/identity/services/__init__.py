from .learner_lookup_service import LearnerLookupService

__all__ = ["LearnerLookupService"]
