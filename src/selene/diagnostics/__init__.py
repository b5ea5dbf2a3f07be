"""Diagnostics (optional).

These tools need the plotting/numerics extras:
  pip install "selene-calendar[diagnostics]"
"""
