"""
Core infrastructure: settings, logging and the SQLite record store.
"""
