from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import current_user, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = token_required(container.auth_service)

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        record = container.attendance_service.check_in(current_user())
        return jsonify(record.to_document())

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        record = container.attendance_service.check_out(current_user())
        return jsonify(record.to_document())

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        rows = container.attendance_service.list_attendance(
            current_user(),
            start_date=request.args.get("startDate") or None,
            end_date=request.args.get("endDate") or None,
            user_id=request.args.get("userId") or None,
        )
        return jsonify(rows)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        return jsonify(container.attendance_service.today_status(current_user()))
