from __future__ import annotations

from flask import Flask

from ..common.web import json_errors, login_required, respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required(container.auth_service)
    @json_errors
    def dashboard():
        return respond({"stats": container.dashboard_service.stats()})
