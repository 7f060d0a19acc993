"""
utils/ - Shared utilities.
"""
