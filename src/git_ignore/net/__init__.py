"""
git_ignore.net – HTTP transports used to refresh the template cache.
"""
from .urllib_transport import UrllibHTTPTransport

__all__ = ["UrllibHTTPTransport"]
