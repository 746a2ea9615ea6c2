"""Personnel System package.

Organized by feature modules (org, employees, dashboard) with a thin Flask
controller layer on top of plain service functions over in-memory records.
"""
