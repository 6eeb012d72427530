from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_errors
    def list_employees():
        if request.args.get("selectable") in {"1", "true", "yes"}:
            employees = container.employee_service.list_selectable()
        else:
            employees = container.employee_service.list_employees()
        return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @api_errors
    def add_employee():
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.add_employee(
            name=data.get("name", ""),
            fingerprint_id=data.get("fingerprintId"),
        )
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees/<employee_id>/toggle", methods=["POST"], endpoint="toggle_employee")
    @api_errors
    def toggle_employee(employee_id: str):
        employee = container.employee_service.toggle_status(employee_id)
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<employee_id>/enrollment", methods=["POST"], endpoint="enroll_employee")
    @api_errors
    def enroll_employee(employee_id: str):
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.complete_enrollment(
            employee_id, fingerprint_id=data.get("fingerprintId", "")
        )
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_errors
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(employee_id)
        return jsonify({"success": True})
