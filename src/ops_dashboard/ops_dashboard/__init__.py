"""Operations dashboard package.

This package is organized by feature modules (works, members, employees,
attendance, payroll, expenses, ...) with a thin Flask controller layer over
service and repository layers backed by a document store.
"""
