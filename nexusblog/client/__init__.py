"""Terminal client for the Nexus Blog API."""

from nexusblog.client.api import BlogCard, BlogClient, ClientError
from nexusblog.client.tokens import TokenStore

__all__ = ["BlogCard", "BlogClient", "ClientError", "TokenStore"]
