from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for the Credential Store.

    Note: services depend on this interface, never on a concrete backend.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def add(self, user: User) -> None:
        """Append a user. Raises DuplicateEmail if the email is already stored."""

        raise NotImplementedError
