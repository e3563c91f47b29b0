"""
Authentication routes
Handles admin login and logout
"""

import logging

from flask import Blueprint, redirect, render_template, url_for

from scripthub.forms import LoginForm
from scripthub.routes import request_data

logger = logging.getLogger(__name__)


def create_blueprint(auth_service):
    """Build the auth blueprint around an auth service"""
    bp = Blueprint('auth', __name__)

    @bp.route('/login', methods=['GET'])
    def login():
        """Login page"""
        return render_template('admin/login.html', title='Acceso', error=None)

    @bp.route('/login', methods=['POST'])
    def submit_login():
        """Check the submitted credentials"""
        form = LoginForm.from_mapping(request_data())
        error = auth_service.check_credentials(form)
        if error:
            logger.warning(f"[Auth] Failed admin login for {form.username!r}")
            return render_template('admin/login.html', title='Acceso', error=error)

        auth_service.login()
        logger.info("[Auth] Admin logged in")
        return redirect(url_for('admin.dashboard'))

    @bp.route('/logout', methods=['POST'])
    def logout():
        """Logout admin"""
        auth_service.logout()
        return redirect(url_for('public.home'))

    return bp
