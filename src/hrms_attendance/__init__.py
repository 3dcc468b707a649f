"""HRMS attendance package.

Organized by feature modules (employees, leaves, attendance, payroll, accounts)
with a thin Flask controller layer over service/repository layers.
"""
