"""
Core infrastructure shared by the whole application: configuration
and logging setup.
"""
