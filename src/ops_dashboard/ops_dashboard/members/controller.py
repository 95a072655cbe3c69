from __future__ import annotations

from flask import Flask, request

from ..common.notifications import current_notifier
from ..common.web import json_errors, login_required, respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_service)

    @app.route("/api/members", endpoint="members")
    @auth_required
    @json_errors
    def members():
        if (request.args.get("dueToday") or "").lower() in ("1", "true", "yes"):
            return respond({"members": container.member_service.due_today()})
        return respond({"members": container.member_service.list_with_schedule()})

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    @auth_required
    @json_errors
    def delete_member(member_id: str):
        container.member_service.delete(member_id)
        current_notifier().success("Member deleted")
        return respond()
