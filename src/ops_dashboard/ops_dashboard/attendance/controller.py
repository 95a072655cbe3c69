from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local, to_iso_date
from ..common.notifications import current_notifier
from ..common.web import body, date_arg, json_errors, login_required, month_arg, respond
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_service)
    attendance = container.attendance_service

    def _filtered():
        day = date_arg()
        return attendance.filter(
            work_date=to_iso_date(day) if day else None,
            employee_id=(request.args.get("employeeId") or "").strip() or None,
        )

    @app.route("/api/attendance", endpoint="attendance")
    @auth_required
    @json_errors
    def list_attendance():
        records = _filtered()
        return respond(
            {
                "records": [r.to_dict() for r in records],
                "todayCounts": attendance.today_counts(today=now_local().date()),
            }
        )

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="bulk_mark_attendance")
    @auth_required
    @json_errors
    def bulk_mark_attendance():
        data = body()
        statuses = data.get("statuses") or {}
        if not isinstance(statuses, dict):
            raise ValidationError("statuses must map employee ids to a status")
        result = attendance.bulk_mark(data.get("date") or to_iso_date(now_local().date()), statuses)
        if result.created:
            current_notifier().success(
                "Attendance marked",
                f"{result.created} records created" + (f", {result.skipped} already marked" if result.skipped else ""),
            )
        else:
            current_notifier().info("Nothing to mark", "Attendance already marked for all employees on this date")
        return respond(result.to_dict())

    @app.route("/api/attendance/<record_id>", methods=["PATCH"], endpoint="update_attendance")
    @auth_required
    @json_errors
    def update_attendance(record_id: str):
        attendance.update_status(record_id, body().get("status", ""))
        current_notifier().success("Attendance updated")
        return respond()

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="delete_attendance")
    @auth_required
    @json_errors
    def delete_attendance(record_id: str):
        attendance.delete(record_id)
        current_notifier().success("Attendance deleted")
        return respond()

    @app.route("/api/attendance/summary", endpoint="attendance_summary")
    @auth_required
    @json_errors
    def attendance_summary():
        summary = attendance.monthly_summary(month=month_arg(default=now_local().date()))
        return respond(
            {
                "month": summary["month"],
                "workingDays": summary["workingDays"],
                "rows": [
                    {
                        "employeeId": r.employee_id,
                        "employeeName": r.employee_name,
                        "present": r.present,
                        "absent": r.absent,
                        "halfDay": r.half_day,
                        "leave": r.leave,
                        "percentage": r.percentage,
                    }
                    for r in summary["rows"]
                ],
            }
        )

    @app.route("/api/attendance/export", endpoint="export_attendance")
    @auth_required
    @json_errors
    def export_attendance():
        csv_bytes = attendance.export_csv(_filtered())
        filename = f"attendance_{to_iso_date(now_local().date())}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
