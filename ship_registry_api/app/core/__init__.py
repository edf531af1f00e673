"""Configuration, logging, database and error definitions."""
