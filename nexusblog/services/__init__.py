from nexusblog.services.auth import AuthService

__all__ = ["AuthService"]
