"""HRMS backend package.

Organized by entity modules (departments, ranks, staff, salaries, ...), each
with a plain model, a repository interface, a MySQL repository, a service
holding the rules and a thin Flask controller.
"""
