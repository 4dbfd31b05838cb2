"""Core package for DailyForms.

Contains configuration, logging, and the error hierarchy shared by all layers.
"""
