"""Configuration, logging and storage shared by the application."""
