"""
Firebase Admin initialization for Firestore access.
Initializes from a service account JSON string (preferred) or file path.
"""
import json
import logging
from pathlib import Path
from typing import Any

from rental_monitor.core.config import BASE_DIR, settings

logger = logging.getLogger(__name__)

_firebase_app = None


def _get_credentials() -> dict[str, Any] | None:
    """Load credentials from FIREBASE_SERVICE_ACCOUNT (preferred) or FIREBASE_CREDENTIALS_PATH."""
    json_str = (settings.FIREBASE_SERVICE_ACCOUNT or "").strip()
    if json_str:
        try:
            return json.loads(json_str)
        except json.JSONDecodeError as e:
            logger.warning("Firebase service account JSON invalid: %s", e)
            return None
    path = (settings.FIREBASE_CREDENTIALS_PATH or "").strip()
    if path:
        p = Path(path)
        full_path = p if p.is_absolute() else BASE_DIR / path
        if full_path.exists():
            try:
                with open(full_path) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Firebase credentials file unreadable (%s): %s", full_path, e)
                return None
        logger.warning("Firebase credentials path not found: %s", full_path)
        return None
    return None


def init_firebase() -> bool:
    """Initialize the Firebase Admin app once. Returns False (never raises) when it cannot."""
    global _firebase_app
    if _firebase_app is not None:
        return True
    cred_dict = _get_credentials()
    if not cred_dict:
        logger.error("FIREBASE_SERVICE_ACCOUNT not set")
        return False
    try:
        import firebase_admin
        from firebase_admin import credentials
        cred = credentials.Certificate(cred_dict)
        _firebase_app = firebase_admin.initialize_app(cred)
        logger.info("Firebase initialized")
        return True
    except Exception as e:
        logger.exception("Firebase initialization failed: %s", e)
        return False


def is_firebase_available() -> bool:
    return _firebase_app is not None


def get_firestore_client():
    """Firestore client bound to the initialized app."""
    if _firebase_app is None:
        raise RuntimeError("Firebase is not initialized")
    from firebase_admin import firestore
    return firestore.client(_firebase_app)
