"""
In-memory storage for user records.

``UserStore`` keeps users in an insertion-ordered ``dict`` keyed by id,
so lookups are O(1) while listing still returns records in the order
they were created.  Ids come from a counter that only moves forward;
an id is never handed out twice, even after the record holding it was
deleted.

Absence is reported through return values (``None`` or ``False``)
rather than exceptions, leaving status-code mapping to the API layer.
Every operation takes the store's lock, so a single instance may be
shared between the event loop and worker threads.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..schemas.user import User

logger = logging.getLogger(__name__)

SEED_USERS = (
    ("John Doe", "john@example.com", datetime(2024, 1, 15, tzinfo=timezone.utc)),
    ("Jane Smith", "jane@example.com", datetime(2024, 2, 20, tzinfo=timezone.utc)),
)


class UserStore:
    """Ordered in-memory collection of :class:`User` records."""

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.Lock()
        self._users: Dict[int, User] = {}
        self._next_id = 1
        if seed:
            for name, email, created_at in SEED_USERS:
                self._insert(name, email, created_at)

    def _insert(self, name: str, email: str, created_at: datetime) -> User:
        # Caller holds the lock (or is __init__).
        user = User(id=self._next_id, name=name, email=email, created_at=created_at)
        self._next_id += 1
        self._users[user.id] = user
        return user

    def get_all(self) -> List[User]:
        """Return all users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def get_by_id(self, user_id: Optional[int]) -> Optional[User]:
        """Return the user with ``user_id`` or ``None``."""
        with self._lock:
            return self._users.get(user_id)

    def create(self, name: str, email: str) -> User:
        """Append a new user stamped with the current UTC time."""
        with self._lock:
            user = self._insert(name, email, datetime.now(timezone.utc))
        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: Optional[int], name: str, email: str) -> Optional[User]:
        """Replace name and email of an existing user in place.

        ``id`` and ``createdAt`` never change.  Returns the updated
        record, or ``None`` without touching the store when no user
        has ``user_id``.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.name = name
            user.email = email
        logger.info("Updated user %s", user_id)
        return user

    def delete(self, user_id: Optional[int]) -> bool:
        """Remove a user.  Returns ``True`` if a record was deleted."""
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            return False
        logger.info("Deleted user %s", user_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._users)
