"""Configuration, logging, database bootstrap and error handling."""
