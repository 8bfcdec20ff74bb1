"""Middleware composing OAuth redirect handling with application logic."""

from dropbox_http.middleware.redirect import RedirectMiddleware, with_authorization

__all__ = ["RedirectMiddleware", "with_authorization"]
