"""Firestore integration (REST client, collections, repositories)."""

from roktosheba.infrastructure.firebase._rest_client import FirestoreRESTClient
from roktosheba.infrastructure.firebase.client import create_firestore_client

__all__ = [
    "FirestoreRESTClient",
    "create_firestore_client",
]
