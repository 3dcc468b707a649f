from __future__ import annotations

from flask import Flask, request, session

from ..common.auth import store_account
from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        account = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        store_account(account)
        return ok({"role": account.role.value, "employee": account.employee_id})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok({"message": "Signed out"})
