from referent.routers import actions, articles

__all__ = ["actions", "articles"]
