from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.payloads import (
    details_from_dict,
    employee_from_dict,
    payroll_config_from_dict,
    payroll_run_from_dict,
    timestamp,
)
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.payroll_run_service

    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="api_payroll_calculate")
    def api_payroll_calculate():
        data = request.get_json(silent=True) or {}
        config = payroll_config_from_dict(data.get("config"))
        employee = employee_from_dict(data.get("employee") or {})
        return jsonify({"success": True, "details": service.calculate(employee, config).to_dict()})

    @app.route("/api/payroll/run", methods=["POST"], endpoint="api_payroll_run")
    def api_payroll_run():
        data = request.get_json(silent=True) or {}
        config = payroll_config_from_dict(data.get("config"))
        employees = [employee_from_dict(e) for e in data.get("employees") or []]
        run_date = timestamp(data, "run_date") if data.get("run_date") else now_local()

        run = service.build_run(employees, config, run_date=run_date)
        return jsonify({"success": True, "run": run.to_dict(), "ach_csv": service.ach_file(run, employees)})

    @app.route("/api/payroll/variance", methods=["POST"], endpoint="api_payroll_variance")
    def api_payroll_variance():
        data = request.get_json(silent=True) or {}
        employees = [employee_from_dict(e) for e in data.get("employees") or []]
        previous_run = payroll_run_from_dict(data.get("previous_run"))

        current = data.get("current")
        if current is not None:
            details = {employee_id: details_from_dict(d) for employee_id, d in current.items()}
            report = service.preview(employees, None, previous_run, current_details=details)
        else:
            report = service.preview(employees, payroll_config_from_dict(data.get("config")), previous_run)

        return jsonify(
            {
                "success": True,
                "variances": [v.to_dict() for v in report.variances],
                "summary": asdict(report.summary),
            }
        )
