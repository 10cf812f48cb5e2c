import io
import json

import pytest

from assistwire.stream_reader import (
    StreamAPIError,
    StreamReader,
    TooManyEmptyStreamMessagesError,
)

DATA_1 = (
    '{"id":"1","object":"completion","created":1598069254,"model":"text-davinci-002",'
    '"choices":[{"text":"response1","finish_reason":"max_tokens"}]}'
)
DATA_2 = (
    '{"id":"2","object":"completion","created":1598069255,"model":"text-davinci-002",'
    '"choices":[{"text":"response2","finish_reason":"max_tokens"}]}'
)
EXPECTED_1 = {
    "id": "1",
    "object": "completion",
    "created": 1598069254,
    "model": "text-davinci-002",
    "choices": [{"text": "response1", "finish_reason": "max_tokens"}],
}
EXPECTED_2 = {
    "id": "2",
    "object": "completion",
    "created": 1598069255,
    "model": "text-davinci-002",
    "choices": [{"text": "response2", "finish_reason": "max_tokens"}],
}


def _stream(text, limit=300):
    return StreamReader(io.BytesIO(text.encode()), json.loads, limit)


def _full_stream():
    return (
        "event: message\n"
        f"data: {DATA_1}\n\n"
        "event: message\n"
        f"data: {DATA_2}\n\n"
        "event: done\n"
        "data: [DONE]\n\n"
    )


def test_unmarshal_error_empty_and_invalid():
    stream = _stream("{\n")
    assert stream.unmarshal_error() is None
    with pytest.raises(EOFError):
        stream.recv()
    assert stream.unmarshal_error() is None


def test_too_many_empty_messages():
    stream = _stream("\n\n\n\n", limit=3)
    with pytest.raises(TooManyEmptyStreamMessagesError, match="too many empty messages"):
        stream.recv()


def test_recv_raw_returns_payload():
    stream = _stream('data: {"key": "value"}\n', limit=0)
    assert stream.recv_raw() == b'{"key": "value"}'


def test_completion_stream_messages_then_eof():
    stream = _stream(_full_stream())
    assert stream.recv() == EXPECTED_1
    assert stream.recv() == EXPECTED_2
    with pytest.raises(EOFError):
        stream.recv()
    with pytest.raises(EOFError):
        stream.recv()


def test_iteration_yields_all_messages():
    assert list(_stream(_full_stream())) == [EXPECTED_1, EXPECTED_2]


def test_stream_error_body():
    lines = [
        "{",
        '"error": {',
        '"message": "Incorrect API key provided",',
        '"type": "invalid_request_error",',
        '"param": null,',
        '"code": "invalid_api_key"',
        "}",
        "}",
    ]
    stream = _stream("".join(line + "\n" for line in lines))
    with pytest.raises(StreamAPIError) as info:
        stream.recv()
    assert info.value.code == "invalid_api_key"
    assert info.value.error_type == "invalid_request_error"
    assert info.value.message == "Incorrect API key provided"
    assert info.value.param is None


def test_data_prefixed_error():
    text = 'data: {"error":{"message":"overloaded","type":"server_error"}}\n'
    stream = _stream(text)
    with pytest.raises(StreamAPIError) as info:
        stream.recv()
    assert info.value.message == "overloaded"
    assert info.value.error_type == "server_error"


def test_too_many_empty_messages_after_first_message():
    text = (
        "event: message\n"
        f"data: {DATA_1}\n\n"
        + "\n" * 299
        + "event: message\n"
        f"data: {DATA_2}\n\n"
        "event: done\n"
        "data: [DONE]\n\n"
    )
    stream = _stream(text)
    assert stream.recv() == EXPECTED_1
    with pytest.raises(TooManyEmptyStreamMessagesError):
        stream.recv()


def test_unexpected_termination_is_eof():
    stream = _stream(f"event: message\ndata: {DATA_1}\n\n")
    assert stream.recv() == EXPECTED_1
    with pytest.raises(EOFError):
        stream.recv()


def test_unterminated_last_line_is_discarded():
    stream = _stream(f"data: {DATA_1}")
    with pytest.raises(EOFError):
        stream.recv()


def test_broken_json_raises_decode_error():
    text = (
        "event: message\n"
        f"data: {DATA_1}\n\n"
        "event: message\n"
        'data: {"id":"2","object":"completion","created":1598069255,"model":\n\n'
        "event: done\n"
        "data: [DONE]\n\n"
    )
    stream = _stream(text)
    assert stream.recv() == EXPECTED_1
    with pytest.raises(json.JSONDecodeError):
        stream.recv()


def test_context_manager_closes_reader():
    raw = io.BytesIO(b"data: [DONE]\n")
    with StreamReader(raw, json.loads, 300) as stream:
        assert list(stream) == []
    assert raw.closed


def test_custom_decoder_is_used():
    stream = StreamReader(io.BytesIO(b"data: abc\n"), lambda raw: raw.upper(), 300)
    assert stream.recv() == b"ABC"