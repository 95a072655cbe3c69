"""Helpers shared by the JSON controllers."""
from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import g, jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    ImageUploadError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from ..users.service import AuthService
from .datetime_utils import parse_iso_date
from .notifications import current_notifier

logger = logging.getLogger(__name__)

SESSION_KEY = "auth"


def respond(payload: Optional[dict] = None, *, status: int = 200, success: bool = True):
    body: dict[str, Any] = {"success": success}
    if payload:
        body.update(payload)
    body["notifications"] = current_notifier().drain()
    return jsonify(body), status


def fail(message: str, status: int):
    return respond({"message": message}, status=status, success=False)


def login_required(auth: AuthService):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.auth = auth.validate(session.get(SESSION_KEY))
            except AuthenticationError as e:
                session.pop(SESSION_KEY, None)
                return fail(str(e), 401)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_errors(view):
    """Map domain errors raised by a view to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            current_notifier().error(str(e))
            return fail(str(e), 400)
        except AuthenticationError as e:
            return fail(str(e), 401)
        except NotFoundError as e:
            return fail(str(e) or "Record no longer exists", 404)
        except StoreError as e:
            logger.error("Store failure in %s: %s", request.path, e)
            return fail(str(e), 502)
        except ImageUploadError as e:
            logger.error("Image upload failure in %s: %s", request.path, e)
            current_notifier().error("Failed to upload image", str(e))
            return fail(str(e), 502)

    return wrapper


def body() -> dict:
    """JSON body, or the form fields for multipart/urlencoded posts."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def date_arg(name: str = "date", *, default: Optional[date] = None) -> Optional[date]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return default
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"{name} must be in YYYY-MM-DD format")


def month_arg(name: str = "month", *, default: date) -> date:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return default
    try:
        return parse_iso_date(f"{raw}-01")
    except ValueError:
        raise ValidationError(f"{name} must be in YYYY-MM format")
