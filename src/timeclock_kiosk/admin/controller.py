from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_file, session

from ..common.web import ADMIN_SESSION_KEY, admin_required, json_endpoint, parse_date_arg
from ..container import Container
from ..core.constants import XLSX_MIMETYPE
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def _employee_dict(e) -> dict:
    return {"id": e.id, "name": e.name, "rate": e.rate}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    @json_endpoint
    def admin_login():
        if not container.demo_mode:
            data = request.get_json(silent=True) or {}
            try:
                container.admin_auth_service.verify(data.get("password") or "")
            except AuthenticationError:
                logger.warning("Failed admin login from %s", request.remote_addr)
                raise
        session[ADMIN_SESSION_KEY] = True
        return jsonify({"success": True})

    @app.route("/api/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop(ADMIN_SESSION_KEY, None)
        return jsonify({"success": True})

    @app.route("/api/admin/password", methods=["POST"], endpoint="admin_password")
    @admin_required
    @json_endpoint
    def admin_password():
        data = request.get_json(silent=True) or {}
        container.admin_auth_service.change_password(
            new_password=data.get("new_password") or "",
            confirm_password=data.get("confirm_password") or "",
        )
        return jsonify({"success": True, "message": "Password updated"})

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    @json_endpoint
    def admin_employees():
        employees = container.employee_service.list_all()
        return jsonify({"success": True, "employees": [_employee_dict(e) for e in employees]})

    @app.route("/api/admin/employees", methods=["POST"], endpoint="admin_employees_add")
    @admin_required
    @json_endpoint
    def admin_employees_add():
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.add(name=data.get("name"), rate=data.get("rate"))
        return jsonify({"success": True, "employee": _employee_dict(employee)}), 201

    @app.route("/api/admin/employees/<employee_id>", methods=["PUT"], endpoint="admin_employees_update")
    @admin_required
    @json_endpoint
    def admin_employees_update(employee_id: str):
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.update(employee_id, name=data.get("name"), rate=data.get("rate"))
        return jsonify({"success": True, "employee": _employee_dict(employee)})

    @app.route("/api/admin/employees/<employee_id>", methods=["DELETE"], endpoint="admin_employees_delete")
    @admin_required
    @json_endpoint
    def admin_employees_delete(employee_id: str):
        container.employee_service.delete(employee_id)
        return jsonify({"success": True})

    @app.route("/api/admin/employees/import", methods=["POST"], endpoint="admin_employees_import")
    @admin_required
    @json_endpoint
    def admin_employees_import():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("Please choose an .xlsx file")
        if not upload.filename.lower().endswith(".xlsx"):
            raise ValidationError("Please choose an .xlsx file")

        result = container.employee_service.import_xlsx(upload.stream)
        return jsonify(
            {
                "success": True,
                "imported": result.imported,
                "failed": result.failed,
                "message": f"Import finished. Added: {result.imported}. Errors: {result.failed}.",
            }
        )

    @app.route("/api/admin/payroll", methods=["GET"], endpoint="admin_payroll")
    @admin_required
    @json_endpoint
    def admin_payroll():
        start = parse_date_arg(request.args.get("start"), "start")
        end = parse_date_arg(request.args.get("end"), "end")
        rows = container.payroll_report_service.build_report(start=start, end=end)
        return jsonify(
            {
                "success": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "rows": [r.to_dict() for r in rows],
            }
        )

    @app.route("/api/admin/payroll/export", methods=["GET"], endpoint="admin_payroll_export")
    @admin_required
    @json_endpoint
    def admin_payroll_export():
        start = parse_date_arg(request.args.get("start"), "start")
        end = parse_date_arg(request.args.get("end"), "end")
        out, filename = container.payroll_report_service.export_xlsx(start=start, end=end)
        return send_file(out, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)
