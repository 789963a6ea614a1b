from config import ApplicationConfig

# Tests always run with a signing key and cheap bcrypt rounds
ApplicationConfig.JWT_SECRET = "test-secret-key"
ApplicationConfig.BCRYPT_ROUNDS = 4
ApplicationConfig.SENDGRID_API_KEY = None
ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE = False
