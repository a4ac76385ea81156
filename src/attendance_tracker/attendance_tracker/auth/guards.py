from __future__ import annotations

from functools import wraps
from typing import Callable

from flask import g, request

from ..core.exceptions import Forbidden, MissingToken
from ..users.model import CurrentUser
from ..users.service import AuthService
from .tokens import bearer_token


def token_required(auth: AuthService) -> Callable:
    """Decorator factory: reject requests without a valid bearer token.

    On success the caller is available as `flask.g.current_user`.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token(request.headers.get("Authorization"))
            if not token:
                raise MissingToken()
            g.current_user = auth.authenticate_token(token)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(auth: AuthService) -> Callable:
    login_required = token_required(auth)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not current_user().is_admin:
                raise Forbidden()
            return view(*args, **kwargs)

        return login_required(wrapper)

    return decorator


def current_user() -> CurrentUser:
    return g.current_user
