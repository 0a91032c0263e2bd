"""
Shared utilities: configuration, database access, logging and formatting.
"""
