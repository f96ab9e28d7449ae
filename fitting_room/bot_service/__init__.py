"""Telegram surface of the fitting room."""
