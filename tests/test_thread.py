import pytest

from assistwire.thread import (
    ChunkingStrategy,
    ChunkingStrategyType,
    CodeInterpreterToolResources,
    FileSearchToolResources,
    FileSearchToolResourcesRequest,
    ModifyThreadRequest,
    StaticChunkingStrategy,
    Thread,
    ThreadAttachment,
    ThreadDeleteResponse,
    ThreadMessage,
    ThreadMessageRole,
    ThreadRequest,
    ToolResources,
    ToolResourcesRequest,
    VectorStoreToolResources,
    create_thread_request,
    delete_thread_request,
    modify_thread_request,
    retrieve_thread_request,
)

THREAD_ID = "thread_abc123"


def test_create_thread_request():
    request = create_thread_request(
        ThreadRequest(
            messages=[ThreadMessage(role=ThreadMessageRole.USER, content="Hello, World!")]
        )
    )
    assert request.method == "POST"
    assert request.path == "/threads"
    assert request.assistant_beta is True
    assert request.body == {"messages": [{"role": "user", "content": "Hello, World!"}]}


def test_retrieve_thread_request():
    request = retrieve_thread_request(THREAD_ID)
    assert (request.method, request.path) == ("GET", "/threads/thread_abc123")
    assert request.body is None
    assert request.assistant_beta is True


def test_modify_thread_request():
    request = modify_thread_request(THREAD_ID, ModifyThreadRequest(metadata={"key": "value"}))
    assert (request.method, request.path) == ("POST", "/threads/thread_abc123")
    assert request.body == {"metadata": {"key": "value"}}


def test_modify_thread_request_keeps_null_metadata():
    assert ModifyThreadRequest().to_dict() == {"metadata": None}


def test_delete_thread_request():
    request = delete_thread_request(THREAD_ID)
    assert (request.method, request.path) == ("DELETE", "/threads/thread_abc123")


def test_thread_from_dict():
    thread = Thread.from_dict(
        {
            "id": THREAD_ID,
            "object": "thread",
            "created_at": 1234567890,
            "metadata": {"key": "value"},
            "tool_resources": {"code_interpreter": {"file_ids": ["file-1"]}},
        }
    )
    assert thread.id == THREAD_ID
    assert thread.object == "thread"
    assert thread.created_at == 1234567890
    assert thread.metadata == {"key": "value"}
    assert thread.tool_resources.code_interpreter.file_ids == ["file-1"]
    assert thread.tool_resources.file_search is None


def test_thread_delete_response_from_dict():
    response = ThreadDeleteResponse.from_dict(
        {"id": THREAD_ID, "object": "thread.deleted", "deleted": True}
    )
    assert response == ThreadDeleteResponse(
        id=THREAD_ID, object="thread.deleted", deleted=True
    )


def test_tool_resources_round_trip():
    resources = ToolResources(
        code_interpreter=CodeInterpreterToolResources(file_ids=["file-1"]),
        file_search=FileSearchToolResources(vector_store_ids=["vs_1"]),
    )
    assert ToolResources.from_dict(resources.to_dict()) == resources


def test_tool_resources_request_with_vector_store():
    request = ToolResourcesRequest(
        file_search=FileSearchToolResourcesRequest(
            vector_stores=[
                VectorStoreToolResources(
                    file_ids=["file-1"],
                    chunking_strategy=ChunkingStrategy(
                        type=ChunkingStrategyType.STATIC,
                        static=StaticChunkingStrategy(
                            max_chunk_size_tokens=800, chunk_overlap_tokens=400
                        ),
                    ),
                )
            ]
        )
    )
    assert request.to_dict() == {
        "file_search": {
            "vector_stores": [
                {
                    "file_ids": ["file-1"],
                    "chunking_strategy": {
                        "type": "static",
                        "static": {
                            "max_chunk_size_tokens": 800,
                            "chunk_overlap_tokens": 400,
                        },
                    },
                }
            ]
        }
    }


def test_auto_chunking_strategy_has_no_static_part():
    assert ChunkingStrategy(type=ChunkingStrategyType.AUTO).to_dict() == {"type": "auto"}


def test_message_with_attachments():
    message = ThreadMessage(
        role=ThreadMessageRole.ASSISTANT,
        content="see file",
        attachments=[ThreadAttachment(file_id="file-1", tools=["code_interpreter"])],
        metadata={"k": 1},
    )
    assert message.to_dict() == {
        "role": "assistant",
        "content": "see file",
        "attachments": [{"file_id": "file-1", "tools": [{"type": "code_interpreter"}]}],
        "metadata": {"k": 1},
    }


@pytest.mark.parametrize(
    "request_obj, expected",
    [
        (ThreadRequest(), {}),
        (ThreadRequest(tool_resources=ToolResourcesRequest()), {"tool_resources": {}}),
    ],
)
def test_thread_request_omits_empty(request_obj, expected):
    assert request_obj.to_dict() == expected