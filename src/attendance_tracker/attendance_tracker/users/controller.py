from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required, current_user
from ..container import Container


def register(app: Flask, container: Container) -> None:
    admin_only = admin_required(container.auth_service)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        result = container.auth_service.login(data.get("email"), data.get("password"))
        return jsonify(result.to_dict())

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @admin_only
    def list_users():
        return jsonify(container.user_service.list_users(current_user()))

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @admin_only
    def create_user():
        data = request.get_json(silent=True) or {}
        user = container.user_service.create_user(
            current_user(),
            email=data.get("email"),
            password=data.get("password"),
            name=data.get("name"),
            role=data.get("role"),
            employee_id=data.get("employeeId"),
            department=data.get("department"),
        )
        return jsonify(user), 201
