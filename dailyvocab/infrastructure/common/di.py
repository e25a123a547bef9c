import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from dailyvocab.core import container
from dailyvocab.database import DatabaseSession

T = TypeVar("T")

# container.db is process-wide; sync dependencies run on a threadpool
_session_binding_lock = threading.Lock()


def build_with_session(provider: Provider[T], db: Session) -> T:
    """
    Build a provider's object graph bound to one request's session.

    Factories receive their session while the object is constructed, so
    holding the lock for override, build and reset keeps concurrent requests
    from building against each other's session.
    """
    with _session_binding_lock:
        container.db.override(db)
        try:
            return provider()
        finally:
            container.db.reset_override()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """Create a FastAPI dependency for a container provider."""

    def dependency(db: DatabaseSession) -> T:
        return build_with_session(provider, db)

    return dependency
