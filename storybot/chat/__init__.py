"""Telegram transport for the story dialogue."""
