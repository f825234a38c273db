"""Configuration, logging and error handling shared by the application."""
