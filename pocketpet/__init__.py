"""
Pocket Pet

A virtual pet whose vitals decay in real time, with offline catch-up on resume.
"""

__version__ = "1.0.0"
