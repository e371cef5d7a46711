"""
Auth Service - static admin credential check.

There is exactly one admin account, configured through ``ADMIN_USERNAME`` /
``ADMIN_PASSWORD``. A successful check issues no token or session; callers
must not treat it as an ongoing authenticated session.
"""
import hmac

from flask import current_app

from cyberlearn_app.core.error_handlers import AuthError, ValidationError


class AuthService:
    """Service for Authentication related operations."""

    @staticmethod
    def authenticate_admin(username, password) -> dict:
        """
        Check a username/password pair against the configured admin credential.

        Returns:
            ``{'username': ...}`` on success
        Raises:
            ValidationError if a field is missing, AuthError on mismatch
        """
        if not username or not password:
            raise ValidationError('Username and password are required')

        expected_user = current_app.config.get('ADMIN_USERNAME', '')
        expected_password = current_app.config.get('ADMIN_PASSWORD', '')

        # Both comparisons always run
        user_ok = hmac.compare_digest(str(username).encode('utf-8'), expected_user.encode('utf-8'))
        password_ok = hmac.compare_digest(str(password).encode('utf-8'), expected_password.encode('utf-8'))
        if not (user_ok and password_ok):
            current_app.logger.warning(f"Admin login failed for user: {username}")
            raise AuthError('Invalid credentials')

        current_app.logger.info(f"Admin login successful for user: {username}")
        return {'username': username}
