"""Run endpoints of the assistants API: request building and response parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeVar

from assistwire.endpoint import ApiRequest, Pagination, omit_empty
from assistwire.thread import ThreadMessage, ThreadRequest

E = TypeVar("E", bound=Enum)


class RunStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    FAILED = "failed"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class RequiredActionType(str, Enum):
    SUBMIT_TOOL_OUTPUTS = "submit_tool_outputs"


class RunError(str, Enum):
    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


class TruncationStrategy(str, Enum):
    """How a thread is cut to fit the model's context."""

    AUTO = "auto"
    LAST_MESSAGES = "last_messages"


class RunStepStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    CANCELLING = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"


class RunStepType(str, Enum):
    MESSAGE_CREATION = "message_creation"
    TOOL_CALLS = "tool_calls"


def _as_enum(enum_cls: type[E], value: Any) -> E | str:
    try:
        return enum_cls(value)
    except ValueError:
        return str(value)


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass
class ThreadTruncationStrategy:
    type: TruncationStrategy | str = ""
    last_messages: int | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = omit_empty({"type": _text(self.type)})
        if self.last_messages is not None:
            body["last_messages"] = self.last_messages
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThreadTruncationStrategy:
        kind = data.get("type") or ""
        return cls(
            type=_as_enum(TruncationStrategy, kind) if kind else "",
            last_messages=_optional_int(data.get("last_messages")),
        )


@dataclass
class RunLastError:
    code: RunError | str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunLastError:
        return cls(
            code=_as_enum(RunError, data.get("code") or ""),
            message=str(data.get("message") or ""),
        )


@dataclass
class RunRequiredAction:
    """An action the run waits for; ``submit_tool_outputs`` holds the tool calls, if any."""

    type: RequiredActionType | str = ""
    submit_tool_outputs: list[dict[str, Any]] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunRequiredAction:
        outputs = data.get("submit_tool_outputs")
        return cls(
            type=_as_enum(RequiredActionType, data.get("type") or ""),
            submit_tool_outputs=(
                None if outputs is None else list(outputs.get("tool_calls") or [])
            ),
        )


@dataclass
class Run:
    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    assistant_id: str = ""
    status: RunStatus | str = ""
    required_action: RunRequiredAction | None = None
    last_error: RunLastError | None = None
    expires_at: int = 0
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str = ""
    instructions: str = ""
    tools: list[Any] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    usage: dict[str, Any] = field(default_factory=dict)
    temperature: float | None = None
    max_prompt_tokens: int = 0
    max_completion_tokens: int = 0
    truncation_strategy: ThreadTruncationStrategy | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Run:
        required = data.get("required_action")
        last_error = data.get("last_error")
        truncation = data.get("truncation_strategy")
        temperature = data.get("temperature")
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created_at=int(data.get("created_at") or 0),
            thread_id=str(data.get("thread_id") or ""),
            assistant_id=str(data.get("assistant_id") or ""),
            status=_as_enum(RunStatus, data.get("status") or ""),
            required_action=None if required is None else RunRequiredAction.from_dict(required),
            last_error=None if last_error is None else RunLastError.from_dict(last_error),
            expires_at=int(data.get("expires_at") or 0),
            started_at=_optional_int(data.get("started_at")),
            cancelled_at=_optional_int(data.get("cancelled_at")),
            failed_at=_optional_int(data.get("failed_at")),
            completed_at=_optional_int(data.get("completed_at")),
            model=str(data.get("model") or ""),
            instructions=str(data.get("instructions") or ""),
            tools=list(data.get("tools") or []),
            file_ids=list(data.get("file_ids") or []),
            metadata=data.get("metadata"),
            usage=dict(data.get("usage") or {}),
            temperature=None if temperature is None else float(temperature),
            max_prompt_tokens=int(data.get("max_prompt_tokens") or 0),
            max_completion_tokens=int(data.get("max_completion_tokens") or 0),
            truncation_strategy=(
                None if truncation is None else ThreadTruncationStrategy.from_dict(truncation)
            ),
        )


@dataclass
class RunRequest:
    """Parameters for starting a run.

    ``tool_choice``, ``response_format`` and ``parallel_tool_calls`` are sent
    whenever they are not None, so ``parallel_tool_calls=False`` is sent.
    """

    assistant_id: str = ""
    model: str = ""
    instructions: str = ""
    additional_instructions: str = ""
    additional_messages: list[ThreadMessage] = field(default_factory=list)
    tools: list[Any] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    temperature: float | None = None
    top_p: float | None = None
    max_prompt_tokens: int = 0
    max_completion_tokens: int = 0
    truncation_strategy: ThreadTruncationStrategy | None = None
    tool_choice: Any = None
    response_format: Any = None
    parallel_tool_calls: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"assistant_id": self.assistant_id}
        body.update(
            omit_empty(
                {
                    "model": self.model,
                    "instructions": self.instructions,
                    "additional_instructions": self.additional_instructions,
                    "additional_messages": [m.to_dict() for m in self.additional_messages],
                    "tools": list(self.tools),
                    "metadata": self.metadata,
                    "max_prompt_tokens": self.max_prompt_tokens,
                    "max_completion_tokens": self.max_completion_tokens,
                }
            )
        )
        optional = {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "truncation_strategy": (
                None if self.truncation_strategy is None else self.truncation_strategy.to_dict()
            ),
            "tool_choice": self.tool_choice,
            "response_format": self.response_format,
            "parallel_tool_calls": self.parallel_tool_calls,
        }
        body.update({key: value for key, value in optional.items() if value is not None})
        return body


@dataclass
class RunModifyRequest:
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({"metadata": self.metadata})


@dataclass
class RunList:
    runs: list[Run] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunList:
        return cls(runs=[Run.from_dict(item) for item in data.get("data") or []])


@dataclass
class ToolOutput:
    tool_call_id: str
    output: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"tool_call_id": self.tool_call_id, "output": self.output}


@dataclass
class SubmitToolOutputsRequest:
    tool_outputs: list[ToolOutput] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"tool_outputs": [output.to_dict() for output in self.tool_outputs]}


@dataclass
class CreateThreadAndRunRequest:
    """A run request together with the thread to create for it."""

    run: RunRequest = field(default_factory=RunRequest)
    thread: ThreadRequest = field(default_factory=ThreadRequest)

    def to_dict(self) -> dict[str, Any]:
        body = self.run.to_dict()
        body["thread"] = self.thread.to_dict()
        return body


@dataclass
class StepDetails:
    type: RunStepType | str = ""
    message_id: str | None = None
    tool_calls: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StepDetails:
        creation = data.get("message_creation")
        return cls(
            type=_as_enum(RunStepType, data.get("type") or ""),
            message_id=None if creation is None else str(creation.get("message_id") or ""),
            tool_calls=list(data.get("tool_calls") or []),
        )


@dataclass
class RunStep:
    id: str = ""
    object: str = ""
    created_at: int = 0
    assistant_id: str = ""
    thread_id: str = ""
    run_id: str = ""
    type: RunStepType | str = ""
    status: RunStepStatus | str = ""
    step_details: StepDetails = field(default_factory=StepDetails)
    last_error: RunLastError | None = None
    expired_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunStep:
        last_error = data.get("last_error")
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created_at=int(data.get("created_at") or 0),
            assistant_id=str(data.get("assistant_id") or ""),
            thread_id=str(data.get("thread_id") or ""),
            run_id=str(data.get("run_id") or ""),
            type=_as_enum(RunStepType, data.get("type") or ""),
            status=_as_enum(RunStepStatus, data.get("status") or ""),
            step_details=StepDetails.from_dict(data.get("step_details") or {}),
            last_error=None if last_error is None else RunLastError.from_dict(last_error),
            expired_at=_optional_int(data.get("expired_at")),
            cancelled_at=_optional_int(data.get("cancelled_at")),
            failed_at=_optional_int(data.get("failed_at")),
            completed_at=_optional_int(data.get("completed_at")),
            metadata=data.get("metadata"),
        )


@dataclass
class RunStepList:
    run_steps: list[RunStep] = field(default_factory=list)
    first_id: str = ""
    last_id: str = ""
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunStepList:
        return cls(
            run_steps=[RunStep.from_dict(item) for item in data.get("data") or []],
            first_id=str(data.get("first_id") or ""),
            last_id=str(data.get("last_id") or ""),
            has_more=bool(data.get("has_more", False)),
        )


def _beta(method: str, path: str, body: dict[str, Any] | None = None) -> ApiRequest:
    return ApiRequest(method=method, path=path, body=body, assistant_beta=True)


def create_run_request(thread_id: str, request: RunRequest) -> ApiRequest:
    """Describe the POST /threads/{id}/runs call."""
    return _beta("POST", f"/threads/{thread_id}/runs", request.to_dict())


def retrieve_run_request(thread_id: str, run_id: str) -> ApiRequest:
    """Describe the GET /threads/{id}/runs/{run} call."""
    return _beta("GET", f"/threads/{thread_id}/runs/{run_id}")


def modify_run_request(thread_id: str, run_id: str, request: RunModifyRequest) -> ApiRequest:
    """Describe the POST /threads/{id}/runs/{run} call."""
    return _beta("POST", f"/threads/{thread_id}/runs/{run_id}", request.to_dict())


def list_runs_request(thread_id: str, pagination: Pagination) -> ApiRequest:
    """Describe the GET /threads/{id}/runs call with pagination parameters."""
    return _beta("GET", f"/threads/{thread_id}/runs{pagination.query_string()}")


def submit_tool_outputs_request(
    thread_id: str, run_id: str, request: SubmitToolOutputsRequest
) -> ApiRequest:
    """Describe the POST /threads/{id}/runs/{run}/submit_tool_outputs call."""
    return _beta(
        "POST",
        f"/threads/{thread_id}/runs/{run_id}/submit_tool_outputs",
        request.to_dict(),
    )


def cancel_run_request(thread_id: str, run_id: str) -> ApiRequest:
    """Describe the POST /threads/{id}/runs/{run}/cancel call."""
    return _beta("POST", f"/threads/{thread_id}/runs/{run_id}/cancel")


def create_thread_and_run_request(request: CreateThreadAndRunRequest) -> ApiRequest:
    """Describe the POST /threads/runs call."""
    return _beta("POST", "/threads/runs", request.to_dict())


def retrieve_run_step_request(thread_id: str, run_id: str, step_id: str) -> ApiRequest:
    """Describe the GET /threads/{id}/runs/{run}/steps/{step} call."""
    return _beta("GET", f"/threads/{thread_id}/runs/{run_id}/steps/{step_id}")


def list_run_steps_request(thread_id: str, run_id: str, pagination: Pagination) -> ApiRequest:
    """Describe the GET /threads/{id}/runs/{run}/steps call with pagination parameters."""
    return _beta("GET", f"/threads/{thread_id}/runs/{run_id}/steps{pagination.query_string()}")