"""In-memory user store backing the registration API."""

from __future__ import annotations

import logging
import threading

from easycrud_common.models import User, UserBase

logger = logging.getLogger(__name__)


class UserStore:
    """Ordered collection of registered users plus the id counter.

    All reads and writes go through one lock, so ids stay unique and the
    list is never seen half-mutated when handlers run on several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def register(self, candidate: UserBase) -> User:
        with self._lock:
            user = User(id=self._next_id, **candidate.model_dump())
            self._next_id += 1
            self._users.append(user)
        logger.info("Registered user id=%d", user.id)
        return user

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def delete_by_id(self, user_id: int) -> bool:
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    del self._users[index]
                    break
            else:
                logger.info("Delete requested for unknown user id=%d", user_id)
                return False
        logger.info("Deleted user id=%d", user_id)
        return True
