from __future__ import annotations

from flask import Flask, request

from ..common.auth import admin_required, current_account, login_required
from ..common.http import fail, ok
from ..core.constants import UPLOAD_COMPLETE_MESSAGE
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/upload", methods=["POST"], endpoint="attendance_upload")
    @admin_required
    def attendance_upload():
        upload = request.files.get("attendance")
        if upload is None:
            return fail("Attendance file is required", status=400, code="FILE_REQUIRED")

        report = container.import_service.import_file(upload.stream)
        return ok({"message": UPLOAD_COMPLETE_MESSAGE, "report": report.to_dict()})

    @app.route(
        "/api/attendance/<employee_id>/<page>/<rows_per_page>",
        methods=["GET"],
        endpoint="attendance_page",
    )
    @login_required
    def attendance_page(employee_id, page, rows_per_page):
        result = container.attendance_service.get_page(
            actor=current_account(),
            employee_id=employee_id,
            page=page,
            rows_per_page=rows_per_page,
        )
        return ok({"attendance": [r.to_dict() for r in result.attendance], "total": result.total})
