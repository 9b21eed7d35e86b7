"""Authentication module for atlas-e2e.

Provides login form automation and logout.
"""

from atlas_e2e.auth.login import fill_login_form, login, submit_rejected_login
from atlas_e2e.auth.logout import logout

__all__ = ["fill_login_form", "login", "logout", "submit_rejected_login"]
