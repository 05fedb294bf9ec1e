"""Users app package.

Custom email-login user model and the session endpoints (register,
login, current user) issuing JWT access/refresh tokens.
"""
