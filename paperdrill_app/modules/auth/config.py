# File: paperdrill_app/modules/auth/config.py

class AuthModuleDefaultConfig:
    AUTH_SESSION_LIFETIME_DAYS = 7
    LEARNER_ID = 'learner'
    # Reachable without the session cookie
    PUBLIC_PATHS = ('/login',)
    PUBLIC_PREFIXES = ('/api/', '/static/')
