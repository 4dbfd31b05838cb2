"""Infrastructure layer for DailyForms: persistence and the HTTP boundary."""
