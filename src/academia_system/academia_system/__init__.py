"""Academia System package.

This package is organized by feature modules (users, students, reports, ...)
with a thin Flask controller layer over a document store and an async
directory service.
"""
