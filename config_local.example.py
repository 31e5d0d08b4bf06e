# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. This file should contain only safe overrides.
"""

# Example: Android emulator talking to a server on the host machine
# API_BASE_URL = "http://10.0.2.2:3000"

# Example: explore the screens without a server
# OFFLINE_DEMO = True
