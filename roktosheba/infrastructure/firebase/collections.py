"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".

Queries that combine an equality filter with an order on a different field
(e.g. donations by requesterEmail ordered by createdAt) need composite
indexes declared in the Firebase project.
"""

COLLECTION_USERS = "users"
# Email-claim documents: one per registered email, ID derived from the email.
COLLECTION_USER_EMAILS = "user_emails"
COLLECTION_DONATIONS = "donations"
COLLECTION_DONOR_ASSIGNMENTS = "donor_assignments"
COLLECTION_BLOGS = "blogs"
COLLECTION_FUNDINGS = "fundings"
COLLECTION_CONTACT_MESSAGES = "contact_messages"
