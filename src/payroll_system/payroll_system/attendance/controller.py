from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.payloads import (
    attendance_record_from_dict,
    optional_payroll_config_from_dict,
    require_same_clock,
    shift_from_dict,
    timestamp,
)
from ..common.validators import require_non_empty, require_number
from ..container import Container
from . import rules as attendance_rules
from .summary import calculate_daily_attendance_summary


def register(app: Flask, container: Container) -> None:
    rules = container.attendance_rules

    @app.route("/api/attendance/rules", methods=["GET"], endpoint="api_attendance_rules")
    def api_attendance_rules():
        data = asdict(rules)
        data["weekend_days"] = sorted(rules.weekend_days)
        return jsonify({"success": True, "rules": data})

    @app.route("/api/attendance/status", methods=["POST"], endpoint="api_attendance_status")
    def api_attendance_status():
        data = request.get_json(silent=True) or {}
        check_in = timestamp(data, "check_in_time")
        decision = attendance_rules.determine_attendance_status(
            check_in, shift_from_dict(data.get("shift")), rules, factory=container.strategy_factory
        )
        return jsonify(
            {
                "success": True,
                "status": decision.status.value,
                "late_minutes": decision.late_minutes,
                "is_weekend": attendance_rules.is_weekend(check_in.date(), rules),
            }
        )

    @app.route("/api/attendance/overtime", methods=["POST"], endpoint="api_attendance_overtime")
    def api_attendance_overtime():
        data = request.get_json(silent=True) or {}
        check_in = timestamp(data, "check_in_time")
        check_out = timestamp(data, "check_out_time")
        require_same_clock(check_in, check_out)
        break_minutes = int(require_number(data.get("break_minutes"), "break_minutes", default=0))
        shift = shift_from_dict(data.get("shift"))
        payroll_config = optional_payroll_config_from_dict(data.get("config"))

        overtime = attendance_rules.calculate_overtime_minutes(check_in, check_out, break_minutes, shift, payroll_config, rules)
        work_minutes = attendance_rules.calculate_work_minutes(check_in, check_out, break_minutes)
        return jsonify(
            {
                "success": True,
                "work_minutes": work_minutes,
                "work_time": attendance_rules.format_minutes_as_time(work_minutes),
                "overtime_minutes": overtime,
                "early_leave_minutes": attendance_rules.calculate_early_leave_minutes(check_out, shift, rules),
            }
        )

    @app.route("/api/attendance/absent", methods=["POST"], endpoint="api_attendance_absent")
    def api_attendance_absent():
        data = request.get_json(silent=True) or {}
        now = timestamp(data, "now")
        return jsonify(
            {"success": True, "should_mark_absent": attendance_rules.should_mark_absent(shift_from_dict(data.get("shift")), now, rules)}
        )

    @app.route("/api/attendance/break", methods=["POST"], endpoint="api_attendance_break")
    def api_attendance_break():
        data = request.get_json(silent=True) or {}
        if data.get("break_in") and data.get("break_out"):
            break_in, break_out = timestamp(data, "break_in"), timestamp(data, "break_out")
            require_same_clock(break_in, break_out)
            minutes = attendance_rules.calculate_break_duration(break_in, break_out)
        else:
            minutes = require_number(data.get("minutes"), "minutes")

        result = attendance_rules.validate_break_duration(minutes, rules)
        body = {"success": True, "minutes": minutes, "is_valid": result.is_valid}
        if result.message:
            body["message"] = result.message
        return jsonify(body)

    @app.route("/api/attendance/summary", methods=["POST"], endpoint="api_attendance_summary")
    def api_attendance_summary():
        data = request.get_json(silent=True) or {}
        records = [attendance_record_from_dict(r) for r in data.get("records") or []]
        total_employees = int(require_number(data.get("total_employees"), "total_employees"))

        summary = calculate_daily_attendance_summary(records, total_employees)
        body = {"success": True, "summary": asdict(summary)}
        if data.get("date"):
            body["is_weekend"] = attendance_rules.is_weekend(parse_iso_date(data["date"]), rules)
        return jsonify(body)

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="api_attendance_check_in")
    def api_attendance_check_in():
        data = request.get_json(silent=True) or {}
        now = timestamp(data, "now")
        existing = attendance_record_from_dict(data["existing"]) if data.get("existing") else None

        record = container.attendance_service.check_in(
            require_non_empty(data.get("employee_id"), "employee_id"),
            now=now,
            shift=shift_from_dict(data.get("shift")),
            existing=existing,
        )
        return jsonify({"success": True, "record": record.to_dict()}), 201

    @app.route("/api/attendance/sweep", methods=["POST"], endpoint="api_attendance_sweep")
    def api_attendance_sweep():
        data = request.get_json(silent=True) or {}
        now = timestamp(data, "now")
        records = [attendance_record_from_dict(r) for r in data.get("records") or []]
        require_same_clock(now, *(r.check_in_time for r in records))

        plan = container.attendance_service.daily_sweep(
            data.get("employee_ids") or [],
            records,
            now=now,
            payroll_config=optional_payroll_config_from_dict(data.get("config")),
        )
        return jsonify(
            {
                "success": True,
                "processed": plan.processed,
                "auto_clock_outs": [r.to_dict() for r in plan.auto_clock_outs],
                "absent_employee_ids": plan.absent_employee_ids,
            }
        )
