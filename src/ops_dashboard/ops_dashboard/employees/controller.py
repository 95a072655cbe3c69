from __future__ import annotations

import io

from flask import Flask, request, send_file

from ..common.datetime_utils import month_key, now_local
from ..common.notifications import current_notifier
from ..common.web import body, json_errors, login_required, month_arg, respond
from ..container import Container


def _file_bytes(name: str) -> tuple[bytes | None, str | None]:
    f = request.files.get(name)
    if not f or not f.filename:
        return None, None
    return f.read(), f.filename


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_service)
    employees = container.employee_service
    payroll = container.payroll_service

    @app.route("/api/employees", endpoint="employees")
    @auth_required
    @json_errors
    def list_employees():
        return respond({"employees": payroll.roster(today=now_local().date())})

    @app.route("/api/employees", methods=["POST"], endpoint="register_employee")
    @auth_required
    @json_errors
    def register_employee():
        photo, photo_name = _file_bytes("photo")
        aadhar, aadhar_name = _file_bytes("aadharPhoto")
        employee_id = employees.register(
            name=request.form.get("name", ""),
            address=request.form.get("address", ""),
            contact=request.form.get("contact", ""),
            photo=photo,
            aadhar_photo=aadhar,
            photo_filename=photo_name,
            aadhar_filename=aadhar_name,
        )
        current_notifier().success("Employee added successfully")
        return respond({"id": employee_id}, status=201)

    @app.route("/api/employees/<employee_id>/related-counts", endpoint="employee_related_counts")
    @auth_required
    @json_errors
    def employee_related_counts(employee_id: str):
        return respond({"counts": employees.related_counts(employee_id).to_dict()})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @auth_required
    @json_errors
    def delete_employee(employee_id: str):
        result = employees.delete(employee_id)
        detail = f"Removed {result.attendance} attendance records and {result.images} images"
        if result.complete:
            current_notifier().success("Employee deleted", detail)
        else:
            current_notifier().warning("Employee deleted with errors", detail)
        return respond({"result": result.to_dict()})

    @app.route("/api/employees/<employee_id>/upads", endpoint="employee_upads")
    @auth_required
    @json_errors
    def employee_upads(employee_id: str):
        return respond({"upads": [u.to_dict() for u in payroll.recent_upads(employee_id)]})

    @app.route("/api/employees/<employee_id>/upads", methods=["POST"], endpoint="add_upad")
    @auth_required
    @json_errors
    def add_upad(employee_id: str):
        data = body()
        upad_id = payroll.add_upad(employee_id=employee_id, amount=data.get("amount"), note=data.get("note"))
        current_notifier().success("Advance added")
        return respond({"id": upad_id}, status=201)

    @app.route("/api/employees/<employee_id>/salary", endpoint="employee_salary")
    @auth_required
    @json_errors
    def employee_salary(employee_id: str):
        month = month_arg(default=now_local().date())
        return respond({"salary": payroll.monthly_breakdown(employee_id, month=month)})

    @app.route("/api/employees/salary/export", endpoint="export_salary")
    @auth_required
    @json_errors
    def export_salary():
        month = month_arg(default=now_local().date())
        data = payroll.export_month_excel(month=month)
        return send_file(
            io.BytesIO(data),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=f"salary_{month_key(month)}.xlsx",
        )
