"""Nexus Blog backend."""
