"""
Blog API: posts and comments over HTTP, stored in process memory.

All functionality lives in submodules under ``app``; ``blog_api.run``
starts a server.
"""

__all__ = []
