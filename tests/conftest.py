from __future__ import annotations

import os

# Headless display for tests that open a pygame window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
