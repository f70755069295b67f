"""Fixed sample collections the demos query."""

from __future__ import annotations

from datetime import datetime
from typing import List

from models import CompanyRecord, EmployeeRecord, StudentRecord


def build_cities() -> List[str]:
    return [
        "New York",
        "Los Angeles",
        "Chicago",
        "Houston",
        "Phoenix",
        "Philadelphia",
        "San Antonio",
        "San Diego",
    ]


def build_numbers() -> List[int]:
    return [*range(1, 11), 14, 16, 21, 24, 28, 35, 40]


def _employee(full_name: str, position: str, phone: str, email: str, salary: int) -> EmployeeRecord:
    return EmployeeRecord(full_name=full_name, position=position, phone=phone, email=email, salary=salary)


def build_companies() -> List[CompanyRecord]:
    return [
        CompanyRecord(
            name="Global Bank Ltd",
            founding_date=datetime(1995, 4, 12),
            business_profile="Finance",
            director_full_name="John White",
            employee_count=320,
            address="London, 12 King Street",
            employees=(
                _employee("Oliver Grant", "Manager", "+44 20 7946 0011", "o.grant@globalbank.co.uk", 5200),
                _employee("Emma Hughes", "Accountant", "+44 20 7946 0012", "e.hughes@globalbank.co.uk", 3400),
                _employee("Liam Carter", "Sales Manager", "+44 20 7946 0013", "l.carter@globalbank.co.uk", 4100),
                _employee("Mia Turner", "Clerk", "+44 20 7946 0014", "m.turner@globalbank.co.uk", 2100),
            ),
        ),
        CompanyRecord(
            name="FoodMarket",
            founding_date=datetime(2016, 8, 3),
            business_profile="Retail",
            director_full_name="Anna Smith",
            employee_count=45,
            address="London, 5 Market Road",
            employees=(
                _employee("Noah Evans", "Store Manager", "+44 20 7123 4401", "noah@foodmarket.co.uk", 3100),
                _employee("Ava Price", "Cashier", "+44 20 7123 4402", "ava@foodmarket.co.uk", 1800),
            ),
        ),
        CompanyRecord(
            name="Tech Solutions",
            founding_date=datetime(2005, 2, 28),
            business_profile="IT",
            director_full_name="Michael Black",
            employee_count=150,
            address="Manchester, 8 Oxford Road",
            employees=(
                _employee("Ethan Reed", "Developer", "+44 161 555 0101", "ethan.reed@techsolutions.com", 4500),
                _employee("Grace Bell", "Project Manager", "+44 161 555 0102", "grace.bell@techsolutions.com", 4800),
                _employee("Lucas Hall", "QA Engineer", "+44 161 555 0103", "lucas.hall@techsolutions.com", 3000),
            ),
        ),
        CompanyRecord(
            name="Marketing Pro",
            founding_date=datetime(2019, 11, 11),
            business_profile="Marketing",
            director_full_name="Sarah white",
            employee_count=30,
            address="London, 77 Fleet Street",
            employees=(
                _employee("Chloe Ward", "Marketing Manager", "+44 20 7000 1201", "chloe@marketingpro.com", 3600),
                _employee("Jack Cole", "Designer", "+44 20 7000 1202", "jack@marketingpro.com", 2800),
            ),
        ),
        CompanyRecord(
            name="Foodies Delivery",
            founding_date=datetime(2021, 6, 15),
            business_profile="Logistics",
            director_full_name="David Green",
            employee_count=85,
            address="Liverpool, 3 Dock Road",
        ),
        CompanyRecord(
            name="BlueSky IT",
            founding_date=datetime(2012, 9, 1),
            business_profile="IT",
            director_full_name="Robert Whitehead",
            employee_count=210,
            address="London, 40 Canary Wharf",
            employees=(
                _employee("Henry Fox", "Developer", "+44 20 3000 5501", "henry.fox@bluesky.io", 5000),
                _employee("Isla Moore", "Support Manager", "+44 20 3000 5502", "isla.moore@bluesky.io", 3200),
            ),
        ),
    ]


def build_students() -> List[StudentRecord]:
    rows = [
        ("John", "Brown", 20, "Harvard University"),
        ("Michael", "Smith", 22, "MIT"),
        ("Alice", "Brooks", 19, "Stanford University"),
        ("David", "Johnson", 21, "MIT"),
        ("Emily", "Brooks", 18, "Harvard University"),
        ("Daniel", "Miller", 23, "Oxford University"),
        ("Adam", "Brown", 19, "MIT"),
        ("Sophia", "Bradley", 20, "Stanford University"),
    ]
    return [StudentRecord(name=n, surname=s, age=a, institution=i) for n, s, a, i in rows]
