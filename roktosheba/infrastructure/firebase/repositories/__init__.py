"""Firestore-backed repository implementations."""

from roktosheba.infrastructure.firebase.repositories.blog_repo_firestore import (
    FirestoreBlogRepository,
)
from roktosheba.infrastructure.firebase.repositories.contact_repo_firestore import (
    FirestoreContactRepository,
)
from roktosheba.infrastructure.firebase.repositories.donation_repo_firestore import (
    FirestoreDonationRepository,
)
from roktosheba.infrastructure.firebase.repositories.funding_repo_firestore import (
    FirestoreFundingRepository,
)
from roktosheba.infrastructure.firebase.repositories.user_repo_firestore import (
    FirestoreUserRepository,
)

__all__ = [
    "FirestoreBlogRepository",
    "FirestoreContactRepository",
    "FirestoreDonationRepository",
    "FirestoreFundingRepository",
    "FirestoreUserRepository",
]
