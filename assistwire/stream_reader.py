"""Reader for server-sent event streams of JSON messages."""

from __future__ import annotations

import json
from typing import Any, BinaryIO, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

HEADER_DATA = b"data: "
ERROR_PREFIX = b'data: {"error":'
DEFAULT_EMPTY_MESSAGES_LIMIT = 300


class TooManyEmptyStreamMessagesError(Exception):
    """The stream sent more non-data lines than allowed in a row."""

    def __init__(self, message: str = "stream has sent too many empty messages") -> None:
        super().__init__(message)


class StreamAPIError(Exception):
    """An error object reported by the server inside a stream."""

    def __init__(
        self,
        message: str = "",
        error_type: str = "",
        param: Any = None,
        code: Any = None,
    ) -> None:
        super().__init__(f"error, {message}")
        self.message = message
        self.error_type = error_type
        self.param = param
        self.code = code


def _error_from_payload(payload: Any) -> StreamAPIError | None:
    if not isinstance(payload, dict):
        return None
    detail = payload.get("error")
    if not isinstance(detail, dict):
        detail = {}
    return StreamAPIError(
        message=str(detail.get("message") or ""),
        error_type=str(detail.get("type") or ""),
        param=detail.get("param"),
        code=detail.get("code"),
    )


class StreamReader(Generic[T]):
    """Reads ``data: ...`` lines from a binary stream and decodes each payload.

    The end of the stream, whether by ``data: [DONE]`` or by the connection
    closing, is reported as EOFError by :meth:`recv` and ends iteration.
    """

    def __init__(
        self,
        reader: BinaryIO,
        decode: Callable[[bytes], T] = json.loads,
        empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT,
    ) -> None:
        self._reader = reader
        self._decode = decode
        self._empty_messages_limit = empty_messages_limit
        self._finished = False
        self._errors = bytearray()

    def recv_raw(self) -> bytes:
        """Return the next data payload without decoding it."""
        if self._finished:
            raise EOFError("stream finished")

        empty_messages = 0
        has_error_prefix = False
        while True:
            line = self._reader.readline()
            if not line.endswith(b"\n") or has_error_prefix:
                error = self.unmarshal_error()
                if error is not None:
                    raise error
                raise EOFError("stream ended")

            stripped = line.strip()
            if stripped.startswith(ERROR_PREFIX):
                has_error_prefix = True
            if not stripped.startswith(HEADER_DATA) or has_error_prefix:
                if has_error_prefix:
                    stripped = stripped.removeprefix(HEADER_DATA)
                self._errors += stripped
                empty_messages += 1
                if empty_messages > self._empty_messages_limit:
                    raise TooManyEmptyStreamMessagesError()
                continue

            payload = stripped.removeprefix(HEADER_DATA)
            if payload == b"[DONE]":
                self._finished = True
                raise EOFError("stream finished")
            return payload

    def recv(self) -> T:
        """Return the next decoded message."""
        return self._decode(self.recv_raw())

    def unmarshal_error(self) -> StreamAPIError | None:
        """Parse the collected non-data lines as an error response, if possible."""
        if not self._errors:
            return None
        try:
            payload = json.loads(bytes(self._errors))
        except ValueError:
            return None
        return _error_from_payload(payload)

    def close(self) -> None:
        """Close the underlying stream."""
        close = getattr(self._reader, "close", None)
        if close is not None:
            close()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.recv()
            except EOFError:
                return

    def __enter__(self) -> StreamReader[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()