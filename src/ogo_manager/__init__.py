"""OGO Manager package.

Project/employee management dashboard organized by feature modules
(employees, projects, analytics, reports, ...) with a thin Flask controller
layer over service/repository layers.
"""
