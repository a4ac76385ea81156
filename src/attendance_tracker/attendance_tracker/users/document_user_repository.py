from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import DuplicateEmail
from ..database.document_store import JsonFileDocument, MemoryDocument
from .model import User
from .repository import UserRepository


class DocumentUserRepository(UserRepository):
    """Users kept as one JSON array (in memory or in users.json)."""

    def __init__(self, document: MemoryDocument | JsonFileDocument):
        self._doc = document

    def _load(self) -> list[User]:
        return [User.from_document(d) for d in self._doc.read()]

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._load() if u.id == user_id), None)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._load() if u.email == email), None)

    def list_all(self) -> Sequence[User]:
        return self._load()

    def add(self, user: User) -> None:
        with self._doc.lock:
            items = self._doc.read()
            if any(d.get("email") == user.email for d in items):
                raise DuplicateEmail()
            items.append(user.to_document())
            self._doc.write(items)
