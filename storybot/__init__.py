"""Telegram bot that collects story preferences and generates personalised children's stories."""
