import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./lumiere.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Signing key has no default: a missing key is a deployment error
    JWT_SECRET = data.get("JWT_SECRET", os.environ.get("JWT_SECRET"))
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_HOURS = data.get("JWT_EXPIRES_HOURS", 10)

    PASSWORD_RESET_EXPIRES_MINUTES = data.get("PASSWORD_RESET_EXPIRES_MINUTES", 60)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)

    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    SENDGRID_API_KEY = data.get("SENDGRID_API_KEY", os.environ.get("SENDGRID_API_KEY"))
    EMAIL_SENDER = data.get("EMAIL_SENDER", "no-reply@lumiere.local")
    EMAIL_SENDER_NAME = data.get("EMAIL_SENDER_NAME", "Lumiere Support")
