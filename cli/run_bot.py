#!/usr/bin/env python3
"""Run the story bot with long polling."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from storybot.chat.app import main


if __name__ == "__main__":
    main()
