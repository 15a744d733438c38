"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IBannerRepository,
    ICrudRepository,
    IPostRepository,
    IRawCollectionReader,
    ISectionRepository,
)
from app.application.interfaces.services import IIdentityProvider, IOrderAssigner

__all__ = [
    "IBannerRepository",
    "ICrudRepository",
    "IIdentityProvider",
    "IOrderAssigner",
    "IPostRepository",
    "IRawCollectionReader",
    "ISectionRepository",
]
