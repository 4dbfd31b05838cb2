"""HTTP boundary for DailyForms."""
