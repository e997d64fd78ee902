"""
Version 1 of the API.

The version is an internal grouping only; routes are mounted under
``/api`` without a version segment to keep the public paths stable.
"""
