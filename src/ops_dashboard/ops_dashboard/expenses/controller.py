from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.notifications import current_notifier
from ..common.web import body, date_arg, json_errors, login_required, respond
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_service)
    expenses = container.expense_service

    @app.route("/api/expenses", methods=["POST"], endpoint="save_expenses")
    @auth_required
    @json_errors
    def save_expenses():
        data = body()
        raw_date = (data.get("date") or "").strip()
        try:
            day = parse_iso_date(raw_date) if raw_date else None
        except ValueError:
            raise ValidationError("Date must be in YYYY-MM-DD format")

        entries = data.get("entries")
        if not isinstance(entries, list):
            entries = [data]
        ids = expenses.save(day=day, entries=entries)
        current_notifier().success(f"{len(ids)} expense(s) saved")
        return respond({"ids": ids}, status=201)

    @app.route("/api/expenses/summary", endpoint="expense_summary")
    @auth_required
    @json_errors
    def expense_summary():
        return respond({"summary": expenses.daily_summary(day=date_arg()).to_dict()})
