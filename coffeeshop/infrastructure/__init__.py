"""Infrastructure layer - logging and database wiring."""
