import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Try to load .env from the sms_portal directory first, then fallback to project root
portal_env = Path(__file__).parent / ".env"
project_root_env = Path(__file__).parent.parent / ".env"

if portal_env.exists():
    load_dotenv(dotenv_path=portal_env)
elif project_root_env.exists():
    load_dotenv(dotenv_path=project_root_env)
else:
    load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost/sms/api").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
TOKEN_KEY = os.getenv("TOKEN_KEY", "auth_token")

UNIVERSITY_NAME = os.getenv("UNIVERSITY_NAME", "Tezpur University")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_logging_configured = False


def configure_logging(level: str = None) -> None:
    """
    Configure the root logger once per process.
    Streamlit reruns the entry script on every interaction, so repeated calls are no-ops.
    """
    global _logging_configured
    if _logging_configured:
        return

    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    _logging_configured = True
