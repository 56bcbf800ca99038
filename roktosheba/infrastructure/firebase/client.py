"""Firestore client construction.

Builds the FirestoreRESTClient from FIREBASE_SERVICE_ACCOUNT_KEY (JSON string)
or FIREBASE_SERVICE_ACCOUNT_PATH (file path). The lifespan creates one client at
startup, stores it on app.state and closes it at shutdown; nothing here keeps
module-level connection state.
"""

import json
import logging
from pathlib import Path

import httpx

from roktosheba.core.config import Settings
from roktosheba.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict:
    """Return service account dict from env key or file path.

    Raises:
        ValueError: If the key is not valid JSON or the file does not exist.
    """
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if not path:
        raise ValueError("No Firebase service account configured")
    resolved = Path(path).expanduser().resolve()
    if not resolved.is_file():
        raise ValueError(
            f"FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: {path} (resolved: {resolved})"
        )
    with open(resolved, encoding="utf-8") as f:
        return json.load(f)


def create_firestore_client(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> FirestoreRESTClient:
    """Build the Firestore client (REST API + google-auth).

    Unlike a lazily-initialized global, failure here is fatal: the service
    cannot run without its document store.

    Raises:
        ValueError: On missing or malformed service account credentials.
    """
    key_dict = _load_key_dict(settings)
    project_id = key_dict.get("project_id")
    if not project_id:
        raise ValueError("Firebase service account JSON missing 'project_id'")
    cred = _get_credentials(key_dict)
    logger.info("Firestore client configured for project %s", project_id)
    return FirestoreRESTClient(
        project_id,
        cred,
        http_client=http_client,
        timeout=settings.http_timeout_seconds,
    )
