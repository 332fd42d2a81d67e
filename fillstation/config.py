import os
from datetime import timedelta, timezone
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# -----------------------------------------------------------
# Common settings
# -----------------------------------------------------------
PRODUCTION = os.environ.get('PRODUCTION', 'false').lower() == 'true'
JWT_SECRET = os.environ.get('JWT_SECRET', 'change-me')
JWT_LIFETIME_SECONDS = int(os.environ.get('JWT_LIFETIME_SECONDS', 86400))
RESET_PASSWORD_TOKEN_LIFETIME_SECONDS = int(os.environ.get('RESET_PASSWORD_TOKEN_LIFETIME_SECONDS', 3600))
SQLALCHEMY_ECHO = os.environ.get('SQLALCHEMY_ECHO', 'false').lower() == 'true'
ROOT_DIR = Path(__file__).parent.parent
LOG_DIR = os.environ.get('LOG_DIR', os.path.join(ROOT_DIR, "log"))
TZ = timezone(offset=timedelta(hours=1), name='WAT')


# -----------------------------------------------------------
# Main PostgreSQL database
# -----------------------------------------------------------
DB_FQDN_HOST = os.environ.get('DB_FQDN_HOST', 'localhost')
DB_PORT = int(os.environ.get('DB_PORT', 5432))
DB_NAME = os.environ.get('DB_NAME', 'fillstation')
DB_USER = os.environ.get('DB_USER', 'fillstation')
DB_PASSWORD = os.environ.get('DB_PASSWORD', '')
DB_SSL_REQUIRED = os.environ.get('DB_SSL_REQUIRED', 'false').lower() == 'true'
SCHEMA = os.environ.get('DB_SCHEMA') or None
PROD_URI = "postgresql+psycopg://{}:{}@{}:{}/{}".format(
    DB_USER,
    DB_PASSWORD,
    DB_FQDN_HOST,
    DB_PORT,
    DB_NAME
)


# -----------------------------------------------------------
# Mail
# -----------------------------------------------------------
MAIL_SERVER = os.environ.get("MAIL_SERVER", "localhost")
MAIL_PORT = int(os.environ.get("MAIL_PORT", 587))
MAIL_USER = os.environ.get("MAIL_USER", "")
MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD", "")
MAIL_FROM = os.environ.get("MAIL_FROM", "no-reply@flourish-station.com")
CONTACT_MAIL_TO = [
    address.strip() for address in os.environ.get("CONTACT_MAIL_TO", MAIL_FROM).split(",") if address.strip()
]
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
