"""
version.py — Design State
==========================
Single source of truth for the package version.
Used by:
  - pyproject.toml (kept in sync by hand)
  - logging startup banner
"""

APP_NAME = "designstate"
VERSION  = "1.0.0"
BUILD    = "2026.10.16"
