"""Infrastructure layer - logging and dependency injection implementations."""
