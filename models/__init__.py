"""
models/ - Domain models.
"""
