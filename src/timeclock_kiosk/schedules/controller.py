from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_month
from ..common.web import json_endpoint, parse_date_arg
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["GET"], endpoint="schedules_month")
    @json_endpoint
    def schedules_month():
        month_s = request.args.get("month")
        if month_s:
            try:
                month = parse_month(month_s)
            except ValueError:
                raise ValidationError("month must be YYYY-MM") from None
        else:
            month = now_local().date().replace(day=1)

        days = container.kiosk_service.calendar_month(month)
        schedule = container.schedule_service.snapshot()
        return jsonify(
            {
                "success": True,
                "month": month.strftime("%Y-%m"),
                "days": [d.to_dict() for d in days],
                "schedule": {k: sorted(v) for k, v in schedule.items()},
            }
        )

    @app.route("/api/schedules/<date_key>", methods=["GET"], endpoint="schedules_get")
    @json_endpoint
    def schedules_get(date_key: str):
        day = parse_date_arg(date_key, "date")
        return jsonify({"success": True, "date": day.isoformat(), "employee_ids": sorted(container.schedule_service.get_for_date(day))})

    @app.route("/api/schedules/<date_key>", methods=["PUT"], endpoint="schedules_update")
    @json_endpoint
    def schedules_update(date_key: str):
        day = parse_date_arg(date_key, "date")
        data = request.get_json(silent=True) or {}
        ids = data.get("employee_ids")
        if not isinstance(ids, list):
            raise ValidationError("employee_ids must be a list")

        scheduled = container.schedule_service.update(day=day, employee_ids=ids)
        return jsonify({"success": True, "date": day.isoformat(), "employee_ids": sorted(scheduled)})
