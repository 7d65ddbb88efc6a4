# src/levantflow/firebase.py

import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials
from flask import Flask

logger = logging.getLogger(__name__)


def init_firebase(app: Flask) -> Optional[firebase_admin.App]:
    """
    Initialize the Firebase Admin SDK when credentials or a project id are configured.

    An already-initialized default app is reused. Failures are logged and
    leave Firebase uninitialized; the service itself does not depend on it.
    """
    credential_path = app.config.get("FIREBASE_CREDENTIAL_PATH")
    project_id = app.config.get("FIREBASE_PROJECT_ID")

    if not credential_path and not project_id:
        logger.info("Firebase not configured, skipping initialization.")
        return None

    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    try:
        if credential_path:
            cred = credentials.Certificate(credential_path)
        else:
            cred = credentials.ApplicationDefault()
        options = {"projectId": project_id} if project_id else None
        firebase_app = firebase_admin.initialize_app(cred, options)
        logger.info(f"Firebase initialized for project: {project_id or 'from credentials'}")
        return firebase_app
    except (ValueError, OSError) as e:
        logger.error(f"Firebase initialization failed: {e}", exc_info=True)
        return None
