"""Attendance Tracker package.

This package is organized by feature modules (users, attendance, dashboard, ...)
with a thin Flask controller layer and service/repository layers.
"""
