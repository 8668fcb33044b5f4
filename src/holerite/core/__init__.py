"""Payroll domain: models, rules, calculators and validation."""
