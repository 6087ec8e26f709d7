"""Root pytest configuration."""

import os

# The bot token is read lazily, but keep tests independent of any local .env
os.environ.setdefault("BOT_TOKEN", "123456:TEST-TOKEN-FOR-UNIT-TESTS")
