from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from ..shifts.time_parser import format_time_of_day


def register(app: Flask, container: Container) -> None:
    controller = container.controller

    def _status_payload(extra_messages: list[dict] | None = None):
        state = controller.state
        config = state.config
        messages = list(extra_messages or []) + container.ui.drain_messages()
        payload = {
            "status": controller.status.value,
            "phase": controller.phase.value,
            "display": container.ui.display,
            "messages": messages,
            "workdays": {
                "annual_workdays": container.workdays.annual_workdays,
                "days_off": container.workdays.days_off,
                "days_actively_working": container.workdays.days_actively_working,
            },
            "shift": None,
        }
        if config is not None:
            payload["shift"] = {
                "currency": config.currency,
                "annual_salary": config.annual_salary,
                "daily_wage": round(config.daily_wage, 2),
                "start": format_time_of_day(config.start.hour, config.start.minute),
                "end": format_time_of_day(config.end.hour, config.end.minute),
            }
        return payload

    @app.route("/ticker", methods=["GET"], endpoint="ticker_status")
    def ticker_status():
        return jsonify(_status_payload())

    @app.route("/ticker/start", methods=["POST"], endpoint="ticker_start")
    def ticker_start():
        with container.ui.answering(request.form.to_dict()):
            controller.start_ticker()
        return jsonify(_status_payload())

    @app.route("/ticker/cancel", methods=["POST"], endpoint="ticker_cancel")
    def ticker_cancel():
        controller.cancel_ticker()
        return jsonify(_status_payload())

    @app.route("/ticker/settings", methods=["POST"], endpoint="ticker_settings")
    def ticker_settings():
        try:
            annual_s = request.form.get("annual_workdays")
            days_off_s = request.form.get("days_off")
            container.workdays.update(
                annual_workdays=int(annual_s) if annual_s else None,
                days_off=int(days_off_s) if days_off_s else None,
            )
        except ValueError:
            return jsonify({"error": "Workday settings must be whole numbers"}), 400
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(_status_payload())
