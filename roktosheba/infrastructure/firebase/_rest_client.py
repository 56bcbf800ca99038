"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.

Supported operations (all async):
- document get / set / update (must exist) / delete (optionally must exist)
- structured queries with AND-ed field filters, order, offset, limit
- count and sum aggregation queries
- atomic multi-document commits with existence preconditions (WriteBatch)
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import urlencode

import httpx

from roktosheba.infrastructure.exceptions import DocumentStoreError
from roktosheba.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_document,
    decode_value,
    encode_document,
    encode_fields,
)

logger = logging.getLogger(__name__)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
_SIMPLE_FIELD_RE = re.compile(r"^[a-zA-Z_][a-zA-Z_0-9]*$")

ASCENDING = "ASCENDING"
DESCENDING = "DESCENDING"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def _field_path(name: str) -> str:
    """Quote a field name for updateMask/fieldPath when it is not a simple identifier."""
    if _SIMPLE_FIELD_RE.match(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    params: list[tuple[str, str]] | None = None,
) -> Any:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if params:
        url = f"{url}?{urlencode(params)}"
    try:
        if method == "GET":
            resp = await client.get(url, headers=headers)
        elif method == "PATCH":
            resp = await client.patch(url, headers=headers, json=body)
        elif method == "POST":
            resp = await client.post(url, headers=headers, json=body)
        elif method == "DELETE":
            resp = await client.delete(url, headers=headers)
        else:
            raise ValueError(f"Unsupported method: {method!r}")
    except httpx.HTTPError as e:
        logger.error("Firestore %s %s failed: %s", method, url, e)
        raise DocumentStoreError(method) from e
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        logger.error(
            "Firestore %s %s returned %s: %s",
            method,
            url,
            resp.status_code,
            resp.text[:500],
        )
        raise DocumentStoreError(method, resp.status_code)
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


class DocumentExistsError(Exception):
    """Raised when a create or exists=false precondition returns 409 (document already exists)."""


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


def _snapshot(document: dict) -> DocumentSnapshot:
    name = document.get("name", "")
    doc_id = name.split("/")[-1] if name else ""
    return DocumentSnapshot(doc_id, decode_document(document))


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    @property
    def path(self) -> str:
        """Full resource name (projects/.../documents/<collection>/<id>)."""
        return self._path

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (PATCH with full replace)."""
        url = f"{_BASE}/{self._path}"
        await _request_async(
            self._client._http,
            url,
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
        )

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        url = f"{_BASE}/{self._path}"
        out = await _request_async(
            self._client._http, url, access_token=await self._client.get_token()
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def update(self, data: dict[str, Any]) -> DocumentSnapshot | None:
        """Merge the given fields into an existing document.

        Only the keys in data are written (updateMask). Returns the full
        updated document, or None if the document does not exist.
        """
        params = [("updateMask.fieldPaths", _field_path(k)) for k in data]
        params.append(("currentDocument.exists", "true"))
        url = f"{_BASE}/{self._path}"
        out = await _request_async(
            self._client._http,
            url,
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            params=params,
        )
        if out is None:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def delete(self, *, must_exist: bool = False) -> bool:
        """Delete the document.

        With must_exist=False the call is idempotent (True even if missing).
        With must_exist=True returns False when there was nothing to delete.
        """
        url = f"{_BASE}/{self._path}"
        params = [("currentDocument.exists", "true")] if must_exist else None
        out = await _request_async(
            self._client._http,
            url,
            method="DELETE",
            access_token=await self._client.get_token(),
            params=params,
        )
        return out is not None


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array_contains": "ARRAY_CONTAINS",
    "array-contains": "ARRAY_CONTAINS",
}


class _Query:
    """Fluent query builder for a collection; runs via runQuery / runAggregationQuery.

    Filters added with where() are AND-ed. Without limit() every match is returned.
    """

    def __init__(
        self,
        client: "FirestoreRESTClient",
        parent: str,
        collection_id: str,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, str]] = []
        self._offset: int = 0
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> "_Query":
        self._filters.append((field, _OP_MAP.get(op, op), value))
        return self

    def order_by(self, field: str, direction: str = ASCENDING) -> "_Query":
        self._orders.append((field, direction))
        return self

    def offset(self, n: int) -> "_Query":
        self._offset = n
        return self

    def limit(self, n: int) -> "_Query":
        self._limit = n
        return self

    def _where_clause(self) -> dict | None:
        clauses = [
            {
                "fieldFilter": {
                    "field": {"fieldPath": _field_path(field)},
                    "op": op,
                    "value": _encode_value(value),
                }
            }
            for field, op, value in self._filters
        ]
        if not clauses:
            return None
        if len(clauses) == 1:
            return clauses[0]
        return {"compositeFilter": {"op": "AND", "filters": clauses}}

    def to_structured_query(self, *, for_aggregation: bool = False) -> dict[str, Any]:
        """Return the StructuredQuery body. Aggregations drop order/offset/limit."""
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        where = self._where_clause()
        if where is not None:
            structured["where"] = where
        if for_aggregation:
            return structured
        if self._orders:
            structured["orderBy"] = [
                {"field": {"fieldPath": _field_path(field)}, "direction": direction}
                for field, direction in self._orders
            ]
        if self._offset:
            structured["offset"] = self._offset
        if self._limit is not None:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        url = f"{_BASE}/{self._parent}:runQuery"
        body = {"structuredQuery": self.to_structured_query()}
        resp = await _request_async(
            self._client._http,
            url,
            method="POST",
            body=body,
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            yield _snapshot(item["document"])

    async def get(self) -> list[DocumentSnapshot]:
        """Execute the query and return all snapshots as a list."""
        return [snapshot async for snapshot in self.stream()]

    async def _aggregate(self, aggregation: dict[str, Any]) -> Any:
        url = f"{_BASE}/{self._parent}:runAggregationQuery"
        body = {
            "structuredAggregationQuery": {
                "structuredQuery": self.to_structured_query(for_aggregation=True),
                "aggregations": [{"alias": "result", **aggregation}],
            }
        }
        resp = await _request_async(
            self._client._http,
            url,
            method="POST",
            body=body,
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            fields = item.get("result", {}).get("aggregateFields")
            if fields and "result" in fields:
                return decode_value(fields["result"])
        return None

    async def count(self) -> int:
        """Return the number of matching documents (server-side count)."""
        value = await self._aggregate({"count": {}})
        return int(value or 0)

    async def sum(self, field: str) -> int | float:
        """Return the sum of a numeric field over matching documents."""
        value = await self._aggregate({"sum": {"field": {"fieldPath": _field_path(field)}}})
        return value or 0


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    def _query(self) -> _Query:
        parent = self._path.rsplit("/", 1)[0]
        collection_id = self._path.split("/")[-1]
        return _Query(self._client, parent, collection_id)

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a query with a filter. Chain .where(), .order_by(), .offset(), .limit()."""
        return self._query().where(field, op, value)

    def query(self) -> _Query:
        """Start an empty query over the whole collection."""
        return self._query()

    async def count(self) -> int:
        return await self._query().count()


class WriteBatch:
    """Collects writes and applies them in one atomic commit.

    Either every write lands or none does. Preconditions:
    create() requires the document to be absent (409 -> DocumentExistsError);
    update() requires it to exist (commit() returns False otherwise).
    """

    def __init__(self, client: "FirestoreRESTClient") -> None:
        self._client = client
        self._writes: list[dict[str, Any]] = []

    def create(self, ref: DocumentReference, data: dict[str, Any]) -> "WriteBatch":
        self._writes.append({
            "update": {"name": ref.path, "fields": encode_fields(data)},
            "currentDocument": {"exists": False},
        })
        return self

    def update(self, ref: DocumentReference, data: dict[str, Any]) -> "WriteBatch":
        self._writes.append({
            "update": {"name": ref.path, "fields": encode_fields(data)},
            "updateMask": {"fieldPaths": [_field_path(k) for k in data]},
            "currentDocument": {"exists": True},
        })
        return self

    async def commit(self) -> bool:
        """Apply all writes atomically. Returns False if an exists=true precondition failed."""
        if not self._writes:
            return True
        url = f"{_BASE}/{self._client.documents_path}:commit"
        out = await _request_async(
            self._client._http,
            url,
            method="POST",
            body={"writes": self._writes},
            access_token=await self._client.get_token(),
        )
        return out is not None


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        database: str = "(default)",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/{database}/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def documents_path(self) -> str:
        return self._prefix

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    def batch(self) -> WriteBatch:
        return WriteBatch(self)
