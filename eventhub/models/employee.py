from eventhub.extensions import db


class Employee(db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(100), nullable=False)
    salary = db.Column(db.DECIMAL(10, 2), nullable=False)
    hire_date = db.Column(db.Date, nullable=False)

    assignments = db.relationship(
        "Assignment", back_populates="employee", cascade="all, delete-orphan"
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "salary": float(self.salary) if self.salary is not None else None,
            "hireDate": self.hire_date.isoformat() if self.hire_date else None,
        }


class Assignment(db.Model):
    __tablename__ = "assignments"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False)
    role = db.Column(db.String(100), nullable=False)

    employee = db.relationship("Employee", back_populates="assignments")
    event = db.relationship("Event")

    __table_args__ = (
        db.UniqueConstraint("employee_id", "event_id", name="uq_assignment_employee_event"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "eventId": self.event_id,
            "role": self.role,
        }

    def __repr__(self):
        return f"<Assignment employee_id={self.employee_id} event_id={self.event_id} role={self.role}>"
