"""FastAPI application wiring for the car API."""
