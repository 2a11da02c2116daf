"""Configuration, logging, shared errors and FastAPI dependencies."""
