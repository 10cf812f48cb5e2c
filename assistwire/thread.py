"""Thread endpoints of the assistants API: request building and response parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from assistwire.endpoint import ApiRequest, omit_empty

THREADS_PATH = "/threads"


class ChunkingStrategyType(str, Enum):
    AUTO = "auto"
    STATIC = "static"


class ThreadMessageRole(str, Enum):
    ASSISTANT = "assistant"
    USER = "user"


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class StaticChunkingStrategy:
    max_chunk_size_tokens: int = 0
    chunk_overlap_tokens: int = 0


@dataclass
class ChunkingStrategy:
    type: ChunkingStrategyType | str
    static: StaticChunkingStrategy | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"type": _text(self.type)}
        if self.static is not None:
            body["static"] = {
                "max_chunk_size_tokens": self.static.max_chunk_size_tokens,
                "chunk_overlap_tokens": self.static.chunk_overlap_tokens,
            }
        return body


@dataclass
class VectorStoreToolResources:
    file_ids: list[str] = field(default_factory=list)
    chunking_strategy: ChunkingStrategy | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        body = omit_empty({"file_ids": list(self.file_ids), "metadata": self.metadata})
        if self.chunking_strategy is not None:
            body["chunking_strategy"] = self.chunking_strategy.to_dict()
        return body


@dataclass
class CodeInterpreterToolResources:
    file_ids: list[str] = field(default_factory=list)


@dataclass
class FileSearchToolResources:
    vector_store_ids: list[str] = field(default_factory=list)


@dataclass
class ToolResources:
    code_interpreter: CodeInterpreterToolResources | None = None
    file_search: FileSearchToolResources | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolResources:
        code = data.get("code_interpreter")
        search = data.get("file_search")
        return cls(
            code_interpreter=(
                None
                if code is None
                else CodeInterpreterToolResources(file_ids=list(code.get("file_ids") or []))
            ),
            file_search=(
                None
                if search is None
                else FileSearchToolResources(
                    vector_store_ids=list(search.get("vector_store_ids") or [])
                )
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.code_interpreter is not None:
            body["code_interpreter"] = omit_empty(
                {"file_ids": list(self.code_interpreter.file_ids)}
            )
        if self.file_search is not None:
            body["file_search"] = omit_empty(
                {"vector_store_ids": list(self.file_search.vector_store_ids)}
            )
        return body


@dataclass
class FileSearchToolResourcesRequest:
    vector_store_ids: list[str] = field(default_factory=list)
    vector_stores: list[VectorStoreToolResources] = field(default_factory=list)


@dataclass
class ToolResourcesRequest:
    code_interpreter: CodeInterpreterToolResources | None = None
    file_search: FileSearchToolResourcesRequest | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.code_interpreter is not None:
            body["code_interpreter"] = omit_empty(
                {"file_ids": list(self.code_interpreter.file_ids)}
            )
        if self.file_search is not None:
            body["file_search"] = omit_empty(
                {
                    "vector_store_ids": list(self.file_search.vector_store_ids),
                    "vector_stores": [
                        store.to_dict() for store in self.file_search.vector_stores
                    ],
                }
            )
        return body


@dataclass
class ThreadAttachment:
    """A file attached to a message, with the types of the tools that may use it."""

    file_id: str
    tools: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id, "tools": [{"type": tool} for tool in self.tools]}


@dataclass
class ThreadMessage:
    role: ThreadMessageRole | str
    content: str
    file_ids: list[str] = field(default_factory=list)
    attachments: list[ThreadAttachment] = field(default_factory=list)
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"role": _text(self.role), "content": self.content}
        body.update(
            omit_empty(
                {
                    "file_ids": list(self.file_ids),
                    "attachments": [item.to_dict() for item in self.attachments],
                    "metadata": self.metadata,
                }
            )
        )
        return body


@dataclass
class ThreadRequest:
    messages: list[ThreadMessage] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResourcesRequest | None = None

    def to_dict(self) -> dict[str, Any]:
        body = omit_empty(
            {
                "messages": [message.to_dict() for message in self.messages],
                "metadata": self.metadata,
            }
        )
        if self.tool_resources is not None:
            body["tool_resources"] = self.tool_resources.to_dict()
        return body


@dataclass
class ModifyThreadRequest:
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResources | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"metadata": self.metadata}
        if self.tool_resources is not None:
            body["tool_resources"] = self.tool_resources.to_dict()
        return body


@dataclass
class Thread:
    id: str = ""
    object: str = ""
    created_at: int = 0
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResources = field(default_factory=ToolResources)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Thread:
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created_at=int(data.get("created_at") or 0),
            metadata=data.get("metadata"),
            tool_resources=ToolResources.from_dict(data.get("tool_resources") or {}),
        )


@dataclass
class ThreadDeleteResponse:
    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThreadDeleteResponse:
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            deleted=bool(data.get("deleted", False)),
        )


def create_thread_request(request: ThreadRequest) -> ApiRequest:
    """Describe the POST /threads call."""
    return ApiRequest(
        method="POST", path=THREADS_PATH, body=request.to_dict(), assistant_beta=True
    )


def retrieve_thread_request(thread_id: str) -> ApiRequest:
    """Describe the GET /threads/{id} call."""
    return ApiRequest(method="GET", path=f"{THREADS_PATH}/{thread_id}", assistant_beta=True)


def modify_thread_request(thread_id: str, request: ModifyThreadRequest) -> ApiRequest:
    """Describe the POST /threads/{id} call."""
    return ApiRequest(
        method="POST",
        path=f"{THREADS_PATH}/{thread_id}",
        body=request.to_dict(),
        assistant_beta=True,
    )


def delete_thread_request(thread_id: str) -> ApiRequest:
    """Describe the DELETE /threads/{id} call."""
    return ApiRequest(
        method="DELETE", path=f"{THREADS_PATH}/{thread_id}", assistant_beta=True
    )