from typing import List, Optional, Tuple
from eventhub.extensions import db
from eventhub.models import Assignment, Employee


class EmployeeRepository:
    @staticmethod
    def get_employees() -> List[Employee]:
        return Employee.query.order_by(Employee.name).all()

    @staticmethod
    def get_employee(employee_id: int) -> Optional[Employee]:
        return Employee.query.filter_by(id=employee_id).first()

    @staticmethod
    def create_employee(attrs) -> Employee:
        employee = Employee(**attrs)
        db.session.add(employee)
        db.session.commit()
        return employee

    @staticmethod
    def update_employee(employee: Employee, attrs: dict) -> Employee:
        for key, value in attrs.items():
            if hasattr(employee, key):
                setattr(employee, key, value)
        db.session.commit()
        return employee

    @staticmethod
    def delete_employee(employee: Employee):
        db.session.delete(employee)
        db.session.commit()


class AssignmentRepository:
    @staticmethod
    def find_by_employee_and_event(employee_id: int, event_id: int) -> Optional[Assignment]:
        return Assignment.query.filter_by(employee_id=employee_id, event_id=event_id).first()

    @staticmethod
    def create_assignment(attrs) -> Assignment:
        assignment = Assignment(**attrs)
        db.session.add(assignment)
        db.session.commit()
        return assignment

    @staticmethod
    def list_for_event(event_id: int) -> List[Tuple[Assignment, Employee]]:
        return (
            db.session.query(Assignment, Employee)
            .join(Employee, Assignment.employee_id == Employee.id)
            .filter(Assignment.event_id == event_id)
            .order_by(Employee.name)
            .all()
        )
