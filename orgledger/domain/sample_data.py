"""Reference dataset: Acme Inc. with three departments, five employees, five sales.

Department and employee rows are listed in insertion order; sale rows refer
to employees by code.
"""

from datetime import date

COMPANY_NAME = "Acme Inc."

DEPARTMENTS = [
    # (code, name)
    ("D001", "Sales"),
    ("D002", "Engineering"),
    ("D003", "Human Resources"),
]

EMPLOYEES = [
    # (code, name, role, department code)
    ("E001", "Alice Martin", "Sales Manager", "D001"),
    ("E002", "Bob Sanchez", "Software Engineer", "D002"),
    ("E003", "Carol White", "HR Coordinator", "D003"),
    ("E004", "David Chen", "QA Engineer", "D002"),
    ("E005", "Eve Summers", "Account Executive", "D001"),
]

SALES = [
    # (code, amount, date, employee code)
    ("S001", 15_000.0, date(2024, 12, 1), "E001"),
    ("S002", 9_500.0, date(2025, 1, 15), "E005"),
    ("S003", 12_000.0, date(2025, 2, 1), "E001"),
    ("S004", 7_500.0, date(2025, 3, 10), "E005"),
    ("S005", 5_000.0, date(2025, 4, 5), "E001"),
]
