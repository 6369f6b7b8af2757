"""Payroll System package.

The payroll & attendance rules engine, organized by feature modules
(employees, payroll, attendance, offboarding, ...) with a thin Flask
controller layer over pure calculation services.
"""
