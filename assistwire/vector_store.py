"""Vector store endpoints of the assistants API: request building and response parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from assistwire.endpoint import ApiRequest, Pagination, omit_empty

VECTOR_STORES_PATH = "/vector_stores"
FILES_PATH = "/files"
FILE_BATCHES_PATH = "/file_batches"


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass
class VectorStoreFileCount:
    in_progress: int = 0
    completed: int = 0
    failed: int = 0
    cancelled: int = 0
    total: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFileCount:
        return cls(
            in_progress=int(data.get("in_progress") or 0),
            completed=int(data.get("completed") or 0),
            failed=int(data.get("failed") or 0),
            cancelled=int(data.get("cancelled") or 0),
            total=int(data.get("total") or 0),
        )


@dataclass
class VectorStoreExpires:
    anchor: str = ""
    days: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreExpires:
        return cls(anchor=str(data.get("anchor") or ""), days=int(data.get("days") or 0))

    def to_dict(self) -> dict[str, Any]:
        return {"anchor": self.anchor, "days": self.days}


@dataclass
class VectorStore:
    id: str = ""
    object: str = ""
    created_at: int = 0
    name: str = ""
    usage_bytes: int = 0
    file_counts: VectorStoreFileCount = field(default_factory=VectorStoreFileCount)
    status: str = ""
    expires_after: VectorStoreExpires | None = None
    expires_at: int | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStore:
        expires_after = data.get("expires_after")
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created_at=int(data.get("created_at") or 0),
            name=str(data.get("name") or ""),
            usage_bytes=int(data.get("usage_bytes") or 0),
            file_counts=VectorStoreFileCount.from_dict(data.get("file_counts") or {}),
            status=str(data.get("status") or ""),
            expires_after=(
                None if expires_after is None else VectorStoreExpires.from_dict(expires_after)
            ),
            expires_at=_optional_int(data.get("expires_at")),
            metadata=data.get("metadata"),
        )


@dataclass
class VectorStoreRequest:
    """Parameters for creating or modifying a vector store; empty fields are left out."""

    name: str = ""
    file_ids: list[str] = field(default_factory=list)
    expires_after: VectorStoreExpires | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        body = omit_empty(
            {"name": self.name, "file_ids": list(self.file_ids), "metadata": self.metadata}
        )
        if self.expires_after is not None:
            body["expires_after"] = self.expires_after.to_dict()
        return body


@dataclass
class VectorStoresList:
    vector_stores: list[VectorStore] = field(default_factory=list)
    last_id: str | None = None
    first_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoresList:
        return cls(
            vector_stores=[VectorStore.from_dict(item) for item in data.get("data") or []],
            last_id=_optional_str(data.get("last_id")),
            first_id=_optional_str(data.get("first_id")),
            has_more=bool(data.get("has_more", False)),
        )


@dataclass
class VectorStoreDeleteResponse:
    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreDeleteResponse:
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            deleted=bool(data.get("deleted", False)),
        )


@dataclass
class VectorStoreFile:
    id: str = ""
    object: str = ""
    created_at: int = 0
    vector_store_id: str = ""
    usage_bytes: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFile:
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created_at=int(data.get("created_at") or 0),
            vector_store_id=str(data.get("vector_store_id") or ""),
            usage_bytes=int(data.get("usage_bytes") or 0),
            status=str(data.get("status") or ""),
        )


@dataclass
class VectorStoreFileRequest:
    file_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id}


@dataclass
class VectorStoreFilesList:
    vector_store_files: list[VectorStoreFile] = field(default_factory=list)
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFilesList:
        return cls(
            vector_store_files=[
                VectorStoreFile.from_dict(item) for item in data.get("data") or []
            ],
            first_id=_optional_str(data.get("first_id")),
            last_id=_optional_str(data.get("last_id")),
            has_more=bool(data.get("has_more", False)),
        )


@dataclass
class VectorStoreFileBatch:
    id: str = ""
    object: str = ""
    created_at: int = 0
    vector_store_id: str = ""
    status: str = ""
    file_counts: VectorStoreFileCount = field(default_factory=VectorStoreFileCount)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFileBatch:
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created_at=int(data.get("created_at") or 0),
            vector_store_id=str(data.get("vector_store_id") or ""),
            status=str(data.get("status") or ""),
            file_counts=VectorStoreFileCount.from_dict(data.get("file_counts") or {}),
        )


@dataclass
class VectorStoreFileBatchRequest:
    file_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file_ids": list(self.file_ids)}


def _beta(method: str, path: str, body: dict[str, Any] | None = None) -> ApiRequest:
    return ApiRequest(method=method, path=path, body=body, assistant_beta=True)


def _store(vector_store_id: str) -> str:
    return f"{VECTOR_STORES_PATH}/{vector_store_id}"


def create_vector_store_request(request: VectorStoreRequest) -> ApiRequest:
    """Describe the POST /vector_stores call."""
    return _beta("POST", VECTOR_STORES_PATH, request.to_dict())


def retrieve_vector_store_request(vector_store_id: str) -> ApiRequest:
    """Describe the GET /vector_stores/{id} call."""
    return _beta("GET", _store(vector_store_id))


def modify_vector_store_request(vector_store_id: str, request: VectorStoreRequest) -> ApiRequest:
    """Describe the POST /vector_stores/{id} call."""
    return _beta("POST", _store(vector_store_id), request.to_dict())


def delete_vector_store_request(vector_store_id: str) -> ApiRequest:
    """Describe the DELETE /vector_stores/{id} call."""
    return _beta("DELETE", _store(vector_store_id))


def list_vector_stores_request(pagination: Pagination) -> ApiRequest:
    """Describe the GET /vector_stores call with pagination parameters."""
    return _beta("GET", f"{VECTOR_STORES_PATH}{pagination.query_string()}")


def create_vector_store_file_request(
    vector_store_id: str, request: VectorStoreFileRequest
) -> ApiRequest:
    """Describe the POST /vector_stores/{id}/files call."""
    return _beta("POST", f"{_store(vector_store_id)}{FILES_PATH}", request.to_dict())


def retrieve_vector_store_file_request(vector_store_id: str, file_id: str) -> ApiRequest:
    """Describe the GET /vector_stores/{id}/files/{file} call."""
    return _beta("GET", f"{_store(vector_store_id)}{FILES_PATH}/{file_id}")


def delete_vector_store_file_request(vector_store_id: str, file_id: str) -> ApiRequest:
    """Describe the DELETE /vector_stores/{id}/files/{file} call; its response is not parsed."""
    return _beta("DELETE", f"{_store(vector_store_id)}{FILES_PATH}/{file_id}")


def list_vector_store_files_request(vector_store_id: str, pagination: Pagination) -> ApiRequest:
    """Describe the GET /vector_stores/{id}/files call with pagination parameters."""
    return _beta("GET", f"{_store(vector_store_id)}{FILES_PATH}{pagination.query_string()}")


def create_vector_store_file_batch_request(
    vector_store_id: str, request: VectorStoreFileBatchRequest
) -> ApiRequest:
    """Describe the POST /vector_stores/{id}/file_batches call."""
    return _beta("POST", f"{_store(vector_store_id)}{FILE_BATCHES_PATH}", request.to_dict())


def retrieve_vector_store_file_batch_request(vector_store_id: str, batch_id: str) -> ApiRequest:
    """Describe the GET /vector_stores/{id}/file_batches/{batch} call."""
    return _beta("GET", f"{_store(vector_store_id)}{FILE_BATCHES_PATH}/{batch_id}")


def cancel_vector_store_file_batch_request(vector_store_id: str, batch_id: str) -> ApiRequest:
    """Describe the POST /vector_stores/{id}/file_batches/{batch}/cancel call."""
    return _beta("POST", f"{_store(vector_store_id)}{FILE_BATCHES_PATH}/{batch_id}/cancel")


def list_vector_store_files_in_batch_request(
    vector_store_id: str, batch_id: str, pagination: Pagination
) -> ApiRequest:
    """Describe the GET /vector_stores/{id}/file_batches/{batch}/files call."""
    return _beta(
        "GET",
        f"{_store(vector_store_id)}{FILE_BATCHES_PATH}/{batch_id}/files"
        f"{pagination.query_string()}",
    )