from __future__ import annotations

from flask import Flask

from ..common.notifications import current_notifier
from ..common.web import body, json_errors, login_required, respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_service)
    works = container.work_service

    @app.route("/api/inquiries", methods=["POST"], endpoint="submit_inquiry")
    @auth_required
    @json_errors
    def submit_inquiry():
        data = body()
        result = container.inquiry_service.submit(
            name=data.get("name", ""),
            contact=data.get("contact", ""),
            inquiry_type=data.get("inquiryType", ""),
            work_type=data.get("type", ""),
            address=data.get("address", ""),
            rate=data.get("rate"),
            work_date=data.get("date"),
            worker=data.get("worker"),
            second_worker=data.get("secondWorker"),
            membership_duration=data.get("membershipDuration"),
        )
        if result.member_id:
            current_notifier().success("Membership inquiry submitted", "Added to pending works and members")
        else:
            current_notifier().success("Inquiry submitted", "Added to pending works")
        return respond({"workId": result.work_id, "memberId": result.member_id}, status=201)

    @app.route("/api/pending-works", endpoint="pending_works")
    @auth_required
    @json_errors
    def pending_works():
        return respond({"works": [w.to_dict() for w in works.list_open()]})

    @app.route("/api/pending-works/<work_id>", methods=["PATCH"], endpoint="edit_pending_work")
    @auth_required
    @json_errors
    def edit_pending_work(work_id: str):
        changes = works.edit(work_id, body())
        current_notifier().success("Work updated")
        return respond({"changes": changes})

    @app.route("/api/pending-works/<work_id>/status", methods=["POST"], endpoint="change_work_status")
    @auth_required
    @json_errors
    def change_work_status(work_id: str):
        updates = works.change_status(work_id, body().get("status", ""))
        current_notifier().success(f"Status changed to {updates['status']}")
        return respond({"changes": updates})

    @app.route("/api/pending-works/<work_id>/share", endpoint="share_pending_work")
    @auth_required
    @json_errors
    def share_pending_work(work_id: str):
        text = works.share_text(work_id, container.employee_service.list_all())
        return respond({"text": text})

    @app.route("/api/pending-works/<work_id>", methods=["DELETE"], endpoint="delete_pending_work")
    @auth_required
    @json_errors
    def delete_pending_work(work_id: str):
        result = works.delete(work_id)
        if result.failures:
            current_notifier().warning("Work deleted", "Some related records could not be removed")
        elif result.members_deleted:
            current_notifier().success("Work deleted", "Membership member removed as well")
        else:
            current_notifier().success("Work deleted")
        return respond(result.to_dict())

    @app.route("/api/completed-works", endpoint="completed_works")
    @auth_required
    @json_errors
    def completed_works():
        return respond({"works": [w.to_dict() for w in works.list_completed()]})

    @app.route("/api/completed-works/<work_id>/reopen", methods=["POST"], endpoint="reopen_work")
    @auth_required
    @json_errors
    def reopen_work(work_id: str):
        works.reopen(work_id)
        current_notifier().success("Work moved back to pending")
        return respond()

    @app.route("/api/completed-works/<work_id>", methods=["DELETE"], endpoint="delete_completed_work")
    @auth_required
    @json_errors
    def delete_completed_work(work_id: str):
        works.delete_completed(work_id)
        current_notifier().success("Work deleted")
        return respond()
