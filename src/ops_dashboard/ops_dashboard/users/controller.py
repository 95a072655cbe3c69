from __future__ import annotations

from flask import Flask, g, session

from ..common.web import SESSION_KEY, body, fail, login_required, respond
from ..container import Container
from ..core.exceptions import AuthenticationError


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = body()
        try:
            ctx = auth.authenticate(str(data.get("username", "")), str(data.get("password", "")))
        except AuthenticationError as e:
            return fail(str(e), 401)

        session.clear()
        session[SESSION_KEY] = ctx.to_session()
        app.logger.info("User %s logged in", ctx.username)
        return respond({"username": ctx.username})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return respond({"message": "Logged out"})

    @app.route("/api/session", endpoint="session_info")
    @login_required(auth)
    def session_info():
        ctx = g.auth
        return respond(
            {
                "username": ctx.username,
                "loggedInAt": ctx.logged_in_at.isoformat(),
                "expiresAt": (ctx.logged_in_at + auth.max_age).isoformat(),
            }
        )
