"""Infrastructure: Firestore persistence and external providers."""
