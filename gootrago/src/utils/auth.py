import logging
import os
from typing import Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from .errors import ConfigurationError, TranslationAuthError

logger = logging.getLogger(__name__)

TRANSLATION_SCOPES = ["https://www.googleapis.com/auth/cloud-translation"]


def load_credentials(credentials_file: Optional[os.PathLike]) -> Optional[service_account.Credentials]:
    """Load service account credentials for the translation clients.

    Without a credentials file the client libraries fall back to Application
    Default Credentials (GOOGLE_APPLICATION_CREDENTIALS, gcloud login, ...),
    so None is returned.
    """
    if not credentials_file:
        logger.debug("No credentials file given, using Application Default Credentials")
        return None

    if not os.path.exists(credentials_file):
        raise ConfigurationError(f"credentials file not found: {credentials_file}")

    try:
        credentials = service_account.Credentials.from_service_account_file(
            os.fspath(credentials_file), scopes=TRANSLATION_SCOPES)
    except (GoogleAuthError, ValueError, OSError) as e:
        raise TranslationAuthError(f"failed to load credentials from {credentials_file}: {e}") from e

    logger.debug(f"Loaded service account credentials from {credentials_file}")
    return credentials
