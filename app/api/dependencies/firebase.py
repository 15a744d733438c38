"""Firebase client access for route dependencies.

The clients live on app.state (built by the lifespan, replaced by fakes in
tests). Routes never import them directly.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.infrastructure.firebase import FirebaseClients


def get_firebase(request: Request) -> FirebaseClients:
    """Return the Firebase clients, or 503 when the app started without credentials."""
    clients = getattr(request.app.state, "firebase", None)
    if clients is None:
        raise HTTPException(status_code=503, detail="Firebase is not configured")
    return clients


FirebaseDep = Annotated[FirebaseClients, Depends(get_firebase)]
