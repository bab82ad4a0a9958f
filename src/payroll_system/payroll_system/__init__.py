"""Payroll System package.

Organized by feature modules (employees, attendance, overtime, leave, payroll, ...)
with a thin Flask controller layer over service/repository layers.
"""
