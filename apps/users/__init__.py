"""Users app package.

Back-office accounts for the Pan Logistics dashboard. Users log in with
email and password, receive a bearer JWT and carry one of two roles
(admin or staff) that gate the management endpoints. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""
