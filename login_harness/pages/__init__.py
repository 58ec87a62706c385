"""Page objects for the login harness."""

from .login_page import LoginPage

__all__ = ["LoginPage"]
