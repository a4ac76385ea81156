from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from werkzeug.security import check_password_hash, generate_password_hash

from ..auth.tokens import TokenIssuer
from ..common.datetime_utils import now_local
from ..common.validators import optional_str, require_non_empty, require_present
from ..core.enums import Role
from ..core.exceptions import (
    DuplicateEmail,
    Forbidden,
    InvalidCredentials,
    InvalidToken,
    ValidationError,
)
from .model import CurrentUser, User
from .repository import UserRepository


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User

    def to_dict(self) -> dict[str, Any]:
        view = self.user.public_view()
        view.pop("createdAt", None)
        return {"token": self.token, "user": view}


class AuthService:
    """Use case: authenticate user (login) and resolve token holders."""

    def __init__(self, users: UserRepository, tokens: TokenIssuer):
        self._users = users
        self._tokens = tokens

    def login(self, email: Any, password: Any) -> LoginResult:
        if not isinstance(email, str) or not isinstance(password, str):
            raise InvalidCredentials()

        user = self._users.get_by_email(email)
        if not user:
            raise InvalidCredentials()

        try:
            ok = check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise InvalidCredentials()

        return LoginResult(token=self._tokens.issue(user), user=user)

    def authenticate_token(self, token: str) -> CurrentUser:
        """Verify a bearer token and re-read the holder from the store.

        The stored role wins over the role claim, so role changes apply immediately.
        """

        claimed = self._tokens.verify(token)
        user = self._users.get_by_id(claimed.id)
        if not user:
            raise InvalidToken()
        return CurrentUser(id=user.id, email=user.email, role=user.role)


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository, *, clock: Callable[[], datetime] = now_local):
        self._users = users
        self._clock = clock

    @staticmethod
    def _require_admin(caller: CurrentUser) -> None:
        if not caller.is_admin:
            raise Forbidden()

    def list_users(self, caller: CurrentUser) -> list[dict[str, Any]]:
        self._require_admin(caller)
        return [u.public_view() for u in self._users.list_all()]

    def create_user(
        self,
        caller: CurrentUser,
        *,
        email: Any,
        password: Any,
        name: Any,
        role: Any = None,
        employee_id: Any = None,
        department: Any = None,
    ) -> dict[str, Any]:
        self._require_admin(caller)

        # stored exactly as given; login matches it byte for byte
        email = require_present(email, "email")
        name = require_non_empty(name, "name")
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")

        try:
            role_value = Role(role) if role else Role.EMPLOYEE
        except ValueError:
            raise ValidationError(f"Unknown role: {role}")

        if self._users.get_by_email(email):
            raise DuplicateEmail()

        user = User(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=generate_password_hash(password),
            name=name,
            role=role_value,
            employee_id=optional_str(employee_id, "employeeId"),
            department=optional_str(department, "department"),
            created_at=self._clock(),
        )
        self._users.add(user)
        return user.public_view()
