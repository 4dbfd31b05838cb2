"""Domain layer for DailyForms.

Entities and services describing collectors, fields, and daily entries.
"""
