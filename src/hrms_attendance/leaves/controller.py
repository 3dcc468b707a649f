from __future__ import annotations

from flask import Flask, request

from ..common.auth import admin_required, current_account, login_required
from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="leave_submit")
    @login_required
    def leave_submit():
        actor = current_account()
        data = request.get_json(silent=True) or {}
        # employees file for themselves unless they say otherwise
        employee_id = data.get("employee", actor.employee_id)
        leave_id = container.leave_service.submit(
            actor=actor,
            employee_id=employee_id,
            leave_type=data.get("leaveType", ""),
            from_date=data.get("fromDate", ""),
            to_date=data.get("toDate", ""),
            reason=data.get("reason", ""),
        )
        return ok({"id": leave_id}, status=202)

    @app.route("/api/leaves/<leave_id>/approve", methods=["PATCH"], endpoint="leave_approve")
    @admin_required
    def leave_approve(leave_id):
        container.leave_service.approve(actor=current_account(), leave_id=leave_id)
        return ok({"id": int(leave_id), "status": "Approved"})

    @app.route("/api/leaves/<leave_id>/reject", methods=["PATCH"], endpoint="leave_reject")
    @admin_required
    def leave_reject(leave_id):
        container.leave_service.reject(actor=current_account(), leave_id=leave_id)
        return ok({"id": int(leave_id), "status": "Rejected"})

    @app.route("/api/leaves/<page>/<rows_per_page>", methods=["GET"], endpoint="leave_list")
    @login_required
    def leave_list(page, rows_per_page):
        result = container.leave_service.list_applications(
            actor=current_account(),
            page=page,
            rows_per_page=rows_per_page,
        )
        return ok({"applications": [a.to_dict() for a in result.applications], "total": result.total})
