"""
Health Tracker - Manual logging of personal health metrics.

Keeps bloodwork test results and a running water intake total in a local
key-value store, with simple per-test statistics and trend listings.
"""

__version__ = "0.1.0"
