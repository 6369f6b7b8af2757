from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.payloads import employee_from_dict, payroll_config_from_dict
from ..common.validators import require_non_empty, require_number
from ..container import Container


def register(app: Flask, container: Container) -> None:
    calculator = container.settlement_calculator

    @app.route("/api/offboarding/settlement", methods=["POST"], endpoint="api_offboarding_settlement")
    def api_offboarding_settlement():
        data = request.get_json(silent=True) or {}
        config = payroll_config_from_dict(data.get("config"))
        employee = employee_from_dict(data.get("employee") or {})
        last_working_day = parse_iso_date(require_non_empty(data.get("last_working_day"), "last_working_day"))

        settlement = calculator.compute(
            employee,
            last_working_day,
            config,
            gratuity_months=require_number(data.get("gratuity_months"), "gratuity_months", default=0),
            additional_payout=require_number(data.get("additional_payout"), "additional_payout", default=0),
        )
        return jsonify({"success": True, "settlement": settlement.to_dict()})
