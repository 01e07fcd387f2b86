from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.web import json_endpoint
from ..container import Container
from ..core.enums import ClockAction
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/kiosk", methods=["GET"], endpoint="kiosk_tiles")
    @json_endpoint
    def kiosk_tiles():
        now = now_local()
        tiles = container.kiosk_service.tiles(now=now)
        return jsonify(
            {
                "success": True,
                "demo_mode": container.demo_mode,
                "now": now.isoformat(timespec="seconds"),
                "employees": [t.to_dict(now) for t in tiles],
            }
        )

    @app.route("/api/kiosk/<employee_id>", methods=["GET"], endpoint="kiosk_terminal")
    @json_endpoint
    def kiosk_terminal(employee_id: str):
        employee = container.employee_service.get(employee_id)
        open_shift = container.clock_service.open_shift(employee_id)
        action = ClockAction.CLOCK_OUT if open_shift is not None else ClockAction.CLOCK_IN
        return jsonify(
            {
                "success": True,
                "employee": {"id": employee.id, "name": employee.name},
                "next_action": action.value,
                "open_shift": (
                    {"id": open_shift.id, "clock_in_time": open_shift.clock_in_time.isoformat()}
                    if open_shift is not None
                    else None
                ),
            }
        )

    @app.route("/api/kiosk/<employee_id>/clock", methods=["POST"], endpoint="kiosk_clock")
    @json_endpoint
    def kiosk_clock(employee_id: str):
        data = request.get_json(silent=True) or {}
        photo = data.get("photo")
        action_s = data.get("action")

        if action_s:
            try:
                action = ClockAction(action_s)
            except ValueError:
                raise ValidationError("Unknown action") from None
            result = container.clock_service.clock(employee_id, action, photo)
        else:
            result = container.clock_service.toggle(employee_id, photo)

        return jsonify(
            {
                "success": True,
                "action": result.action.value,
                "record_id": result.record_id,
                "time": result.at.strftime("%H:%M"),
            }
        )
