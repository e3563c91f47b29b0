"""
Authentication Service
Checks the shared admin credentials and gates admin views on the session flag
"""

import secrets
import logging
from typing import Callable, Optional
from functools import wraps

from flask import redirect, session, url_for

from scripthub.forms import LoginForm

logger = logging.getLogger(__name__)

SESSION_FLAG = 'is_admin'

MISSING_CREDENTIALS = 'Credenciales inválidas'
WRONG_CREDENTIALS = 'Usuario o contraseña incorrectos'


class AuthService:
    """Service for authentication operations"""

    def __init__(self, admin_user: str, admin_pass: str):
        self.admin_user = admin_user
        self.admin_pass = admin_pass

    def check_credentials(self, form: LoginForm) -> Optional[str]:
        """Return None when the credentials match, otherwise the message to show"""
        if not form.validate():
            return MISSING_CREDENTIALS

        # Plain comparison against configured values; no hashing by design
        username_ok = secrets.compare_digest(form.username.encode(), self.admin_user.encode())
        password_ok = secrets.compare_digest(form.password.encode(), self.admin_pass.encode())
        if username_ok and password_ok:
            return None
        return WRONG_CREDENTIALS

    @staticmethod
    def login():
        """Mark the current session as authenticated"""
        session.clear()
        session[SESSION_FLAG] = True

    @staticmethod
    def logout():
        """Drop all session state"""
        session.clear()

    @staticmethod
    def is_authenticated() -> bool:
        return bool(session.get(SESSION_FLAG))


def require_admin(f: Callable) -> Callable:
    """Decorator to require an authenticated admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not AuthService.is_authenticated():
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return decorated_function
