from .employee_record import EmployeeRecord
from .company_record import CompanyRecord
from .student_record import StudentRecord

__all__ = [
    "EmployeeRecord",
    "CompanyRecord",
    "StudentRecord",
]
