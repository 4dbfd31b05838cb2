"""DailyForms - daily form-based data collection.

Administrators define collectors (named forms) with typed fields; users
submit dated entries against them.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
