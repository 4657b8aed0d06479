from datetime import date
from decimal import Decimal, InvalidOperation
from flask import current_app
from sqlalchemy.exc import IntegrityError
from eventhub.extensions import db
from eventhub.exceptions import ConflictError, MissingFieldsError, NotFoundError, ValidationError
from eventhub.repositories import AssignmentRepository, EmployeeRepository, EventRepository
from eventhub.utils.validation import parse_id, parse_text


def _parse_salary(value):
    if isinstance(value, bool):
        raise ValidationError("Salary must be a non-negative number")
    try:
        salary = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError("Salary must be a non-negative number")
    if not salary.is_finite() or salary < 0:
        raise ValidationError("Salary must be a non-negative number")
    return salary


def _employee_attrs(data):
    missing = [f for f in ("name", "role", "salary") if data.get(f) in (None, "")]
    if missing:
        raise MissingFieldsError(missing, "Please provide name, role, and salary")

    attrs = {
        "name": parse_text(data["name"], "name"),
        "role": parse_text(data["role"], "role"),
        "salary": _parse_salary(data["salary"]),
    }
    if data.get("hireDate"):
        try:
            attrs["hire_date"] = date.fromisoformat(data["hireDate"])
        except (TypeError, ValueError):
            raise ValidationError("hireDate must be an ISO-8601 date")
    return attrs


class EmployeeService:
    @staticmethod
    def get_employees():
        return [employee.to_dict() for employee in EmployeeRepository.get_employees()]

    @staticmethod
    def get_employee(employee_id: int):
        employee = EmployeeRepository.get_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee.to_dict()

    @staticmethod
    def create_employee(data) -> int:
        attrs = _employee_attrs(data)
        attrs.setdefault("hire_date", date.today())
        employee = EmployeeRepository.create_employee(attrs)
        current_app.logger.info(f"Employee {employee.id} '{employee.name}' created")
        return employee.id

    @staticmethod
    def update_employee(employee_id: int, data):
        employee = EmployeeRepository.get_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        EmployeeRepository.update_employee(employee, _employee_attrs(data))
        current_app.logger.info(f"Employee {employee_id} updated")

    @staticmethod
    def delete_employee(employee_id: int):
        employee = EmployeeRepository.get_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        EmployeeRepository.delete_employee(employee)
        current_app.logger.info(f"Employee {employee_id} deleted")

    @staticmethod
    def assign_to_event(data) -> int:
        employee_id = data.get("employeeId")
        event_id = data.get("eventId")
        role = data.get("role")
        if not employee_id or not event_id or not role:
            raise MissingFieldsError(
                [f for f in ("employeeId", "eventId", "role") if not data.get(f)],
                "Please provide employeeId, eventId, and role",
            )
        employee_id = parse_id(employee_id, "employeeId")
        event_id = parse_id(event_id, "eventId")

        if not EmployeeRepository.get_employee(employee_id):
            raise NotFoundError("Employee not found")
        if not EventRepository.get_event(event_id):
            raise NotFoundError("Event not found")

        if AssignmentRepository.find_by_employee_and_event(employee_id, event_id):
            raise ConflictError("Employee is already assigned to this event")

        try:
            assignment = AssignmentRepository.create_assignment(
                {"employee_id": employee_id, "event_id": event_id, "role": role}
            )
        except IntegrityError:
            db.session.rollback()
            raise ConflictError("Employee is already assigned to this event")

        current_app.logger.info(
            f"Employee {employee_id} assigned to event {event_id} as '{role}'"
        )
        return assignment.id

    @staticmethod
    def get_assignments_for_event(event_id: int):
        if not EventRepository.get_event(event_id):
            raise NotFoundError("Event not found")

        results = []
        for assignment, employee in AssignmentRepository.list_for_event(event_id):
            data = assignment.to_dict()
            data["employee"] = employee.to_dict()
            results.append(data)
        return results
