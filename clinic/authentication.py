"""
Signed admin session tokens.

The site has a single administrator identified by the password stored
on the site configuration.  A successful login issues a short-lived,
signed access token (``scope=admin``); this authentication class
verifies it on every request carrying ``Authorization: Bearer <token>``.
"""
from __future__ import annotations

from rest_framework import authentication, exceptions
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

ADMIN_SCOPE = 'admin'


class AdminPrincipal:
    """The authenticated administrator (there is only ever one)."""
    is_authenticated = True
    is_anonymous = False
    username = 'admin'
    pk = 'admin'

    def __str__(self) -> str:
        return self.username


def issue_admin_token() -> str:
    token = AccessToken()
    token['scope'] = ADMIN_SCOPE
    return str(token)


class AdminTokenAuthentication(authentication.BaseAuthentication):
    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid token header.')
        try:
            token = AccessToken(header[1].decode())
        except (TokenError, UnicodeError):
            raise exceptions.AuthenticationFailed('Invalid or expired session.')
        if token.get('scope') != ADMIN_SCOPE:
            raise exceptions.AuthenticationFailed('Invalid or expired session.')
        return AdminPrincipal(), token

    def authenticate_header(self, request):
        # Makes DRF answer 401 rather than 403 for missing credentials.
        return self.keyword
