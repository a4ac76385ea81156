from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guards import current_user, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = token_required(container.auth_service)

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @login_required
    def dashboard_stats():
        return jsonify(container.dashboard_service.stats(current_user()))
