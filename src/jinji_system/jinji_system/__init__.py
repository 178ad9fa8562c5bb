"""Jinji personnel system package.

This package is organized by feature modules (employees, attendance, payroll,
evaluations) with a thin Flask controller layer over service/repository layers
that share one transactional store.
"""
