"""Firebase integration over REST: Firestore, Authentication and Cloud Storage."""

from app.infrastructure.firebase.client import FirebaseClients, init_firebase

__all__ = [
    "FirebaseClients",
    "init_firebase",
]
