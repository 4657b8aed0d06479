from flask import Blueprint, jsonify
from eventhub.auth import admin_required
from eventhub.services import EmployeeService
from eventhub.utils.validation import json_body

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/employees", methods=["GET"])
@admin_required
def get_employees():
    """Get all employees ordered by name (admin only)"""
    return jsonify(EmployeeService.get_employees()), 200


@admin_bp.route("/employees/<int:employee_id>", methods=["GET"])
@admin_required
def get_employee(employee_id):
    return jsonify(EmployeeService.get_employee(employee_id)), 200


@admin_bp.route("/employees", methods=["POST"])
@admin_required
def create_employee():
    """Create an employee (admin only)"""
    data = json_body()
    employee_id = EmployeeService.create_employee(data)
    return jsonify({"message": "Employee added successfully", "employeeId": employee_id}), 201


@admin_bp.route("/employees/<int:employee_id>", methods=["PUT"])
@admin_required
def update_employee(employee_id):
    """Update an employee's name, role and salary (admin only)"""
    data = json_body()
    EmployeeService.update_employee(employee_id, data)
    return jsonify({"message": "Employee updated successfully"}), 200


@admin_bp.route("/employees/<int:employee_id>", methods=["DELETE"])
@admin_required
def delete_employee(employee_id):
    EmployeeService.delete_employee(employee_id)
    return jsonify({"message": "Employee deleted successfully"}), 200


@admin_bp.route("/assignEvent", methods=["POST"])
@admin_required
def assign_event():
    """Assign an employee to an event with a role label (admin only)"""
    data = json_body()
    assign_id = EmployeeService.assign_to_event(data)
    return jsonify({"message": "Employee assigned successfully", "assignId": assign_id}), 201
