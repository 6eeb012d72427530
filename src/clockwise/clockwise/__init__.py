"""Clockwise time-clock administration backend.

This package is organized by feature modules (employees, clocking, anomaly)
with a thin Flask controller layer and service/repository layers underneath.
"""
