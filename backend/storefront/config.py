"""
storefront/config.py - Application configuration and Firestore initialization.

Defines a pydantic-settings `Settings` class loaded from the environment (and `.env`),
and `init_firestore()` which initializes the Firebase Admin SDK and returns the async
Firestore client. Nothing here touches the network at import time; the client is created
once on application startup (see `main.py`).
"""
from functools import lru_cache
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""
    jwt_secret: str = Field(..., min_length=8, description="HS256 signing secret")
    jwt_access_expiration_minutes: int = 240
    jwt_refresh_expiration_days: int = 30

    firebase_cred_file: str = 'firebase_service_account.json'
    firebase_project_id: Optional[str] = None

    # Firebase credentials from environment variables (for Cloud Run)
    firebase_private_key_id: Optional[str] = None
    firebase_private_key: Optional[str] = None
    firebase_client_email: Optional[str] = None
    firebase_client_id: Optional[str] = None
    firebase_token_uri: str = 'https://oauth2.googleapis.com/token'

    firestore_collection_prefix: str = ''

    default_wallet_money: float = Field(500, ge=0)
    default_address: str = 'ADDRESS_NOT_SET'
    default_payment_option: str = 'PAYMENT_OPTION_DEFAULT'
    bcrypt_rounds: int = Field(10, ge=4, le=31)

    allowed_origins: str = '*'  # Comma-separated list or '*' for all
    log_level: str = 'INFO'
    debug: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        if not self.allowed_origins:
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(',') if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def _credentials(settings: Settings) -> credentials.Certificate:
    # Use environment variables for Firebase credentials (Cloud Run)
    if all([
        settings.firebase_private_key_id,
        settings.firebase_private_key,
        settings.firebase_client_email,
        settings.firebase_client_id,
    ]):
        return credentials.Certificate({
            "type": "service_account",
            "project_id": settings.firebase_project_id,
            "private_key_id": settings.firebase_private_key_id,
            # Keys pasted into env vars usually carry escaped newlines
            "private_key": settings.firebase_private_key.replace("\\n", "\n"),
            "client_email": settings.firebase_client_email,
            "client_id": settings.firebase_client_id,
            "token_uri": settings.firebase_token_uri,
        })
    # Use service account file (local development)
    return credentials.Certificate(settings.firebase_cred_file)


def init_firestore(settings: Settings):
    """
    Initialize the Firebase Admin SDK (once) and return an async Firestore client.
    """
    try:
        firebase_app = firebase_admin.initialize_app(
            _credentials(settings),
            {'projectId': settings.firebase_project_id} if settings.firebase_project_id else None,
        )
    except ValueError as e:
        if "already exists" in str(e):
            # Firebase app already initialized, get the default app
            firebase_app = firebase_admin.get_app()
        else:
            raise
    return firestore_async.client(firebase_app)
