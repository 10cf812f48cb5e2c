# assistwire

`assistwire` describes the requests and responses of an assistant-style HTTP
API: threads, runs and run steps, vector stores with their files and file
batches, content moderation and text-to-speech. It also has a reader for
server-sent-event streams and a parser for rate-limit response headers.

Supports Python 3.10 and later, with no dependencies beyond the standard
library.

## What it does not do

The package opens no network connections and has no HTTP client, base URL,
authentication or retry handling. Every endpoint helper returns an
`ApiRequest` value naming the HTTP method, the path relative to the API's base
URL (including any query string) and the JSON body. Sending it, adding headers
and decoding the JSON reply are left to the HTTP client you use; the decoded
reply is then turned into a typed model with the matching `from_dict` class
method.

## Modules

| Module | Contents |
| --- | --- |
| `assistwire.endpoint` | `ApiRequest`, `Pagination` (with `query_string()`), `omit_empty()` |
| `assistwire.thread` | Thread, message, attachment and tool-resource models; `create_thread_request`, `retrieve_thread_request`, `modify_thread_request`, `delete_thread_request` |
| `assistwire.run` | Run and run-step models, the `RunStatus`, `RunStepStatus`, `RunStepType`, `RunError`, `RequiredActionType` and `TruncationStrategy` enums; `create_run_request`, `retrieve_run_request`, `modify_run_request`, `list_runs_request`, `submit_tool_outputs_request`, `cancel_run_request`, `create_thread_and_run_request`, `retrieve_run_step_request`, `list_run_steps_request` |
| `assistwire.vector_store` | Vector store, file and file-batch models; `create_`, `retrieve_`, `modify_`, `delete_` and `list_vector_stores_request`, the `*_vector_store_file_request` and `*_vector_store_file_batch_request` builders, `list_vector_store_files_in_batch_request` |
| `assistwire.moderation` | `ModerationRequest`, `ModerationResponse`, `ModerationResult`, `ResultCategories`, `ResultCategoryScores`, `validate_moderation_model()`, `moderation_request()` |
| `assistwire.speech` | `SpeechModel`, `SpeechVoice`, `SpeechResponseFormat`, `CreateSpeechRequest`, `speech_request()` |
| `assistwire.stream_reader` | `StreamReader`, `TooManyEmptyStreamMessagesError`, `StreamAPIError` |
| `assistwire.ratelimit` | `RateLimitHeaders`, `ResetTime`, `parse_duration()`, `new_rate_limit_headers()` |

## Building requests

```python
from assistwire.endpoint import Pagination
from assistwire.run import RunList, list_runs_request

call = list_runs_request("thread_abc123", Pagination(limit=20, order="desc"))
print(call.method, call.path)       # GET /threads/thread_abc123/runs?limit=20&order=desc
print(call.assistant_beta)          # True

# ... send it, decode the JSON reply into `reply`, then:
# runs = RunList.from_dict(reply).runs
```

`ApiRequest` has the fields `method`, `path`, `body`, `model` (the model the
call is for, empty if none), `assistant_beta` (set on thread, run and vector
store calls) and `content_type` (set to `application/json` by
`speech_request`).

`Pagination` puts only the fields that are set into the query string, sorted
by key; with none set, `query_string()` returns an empty string and no `?` is
added.

Request models have a `to_dict()` method that leaves out empty optional
fields, as `omit_empty()` does: `None`, `False`, zero and empty strings or
collections. `RunRequest` sends `tool_choice`, `response_format` and
`parallel_tool_calls` whenever they are not `None`, so
`parallel_tool_calls=False` is sent.

The moderation builder is the only one that validates its input: a model that
is set but is not one of `omni-moderation-latest`,
`omni-moderation-2024-09-26`, `text-moderation-stable` or
`text-moderation-latest` raises `InvalidModerationModelError` (a
`ValueError`). An empty model is accepted.

```python
from assistwire.moderation import InvalidModerationModelError, validate_moderation_model

validate_moderation_model("text-moderation-stable")   # accepted
validate_moderation_model("")                         # accepted

try:
    validate_moderation_model("gpt-3.5-turbo")
except InvalidModerationModelError as exc:
    print(exc)
```

Response models accept the enum fields' known values as enum members and keep
unknown values as plain strings.

## Reading streams

`StreamReader(reader, decode, empty_messages_limit)` wraps a binary file-like
object that yields server-sent-event lines. `decode` turns one `data:` payload
into a message (`json.loads` by default) and the limit defaults to 300.
`recv_raw()` returns the next payload as bytes, `recv()` returns it decoded,
and iterating yields decoded messages. `close()` closes the underlying object,
and the reader works as a context manager.

```python
import io
import json

from assistwire.stream_reader import StreamReader

body = io.BytesIO(b'event: message\ndata: {"id": "1"}\n\ndata: [DONE]\n\n')

with StreamReader(body, json.loads, 300) as stream:
    for event in stream:
        print(event["id"])
```

`data: [DONE]` or the end of the input makes `recv()` and `recv_raw()` raise
`EOFError`, and ends iteration; once `[DONE]` has been seen, every later call
raises `EOFError` as well.

Lines that are not `data:` lines are collected. More of them than the limit
before the next data line raises `TooManyEmptyStreamMessagesError`. When the
input ends, or after a `data: {"error": ...}` line, the collected text is
parsed as JSON; if it is a JSON object it is raised as `StreamAPIError`, with
`message`, `error_type`, `param` and `code` taken from its `error` member.
`unmarshal_error()` returns that error, or `None` if nothing was collected or
it is not valid JSON.

## Rate-limit headers

`new_rate_limit_headers()` reads the `x-ratelimit-*` headers from any mapping
(names matched case-insensitively; a list value uses its first item) into a
`RateLimitHeaders`. Missing or non-integer counts become `0`. The reset values
are `ResetTime` strings such as `"6m0s"`; `ResetTime.time()` returns the local
`datetime` at which the limit resets, or the current time if the value cannot
be parsed.

`parse_duration()` reads durations made of number-and-unit parts (`ns`, `us`,
`µs`, `ms`, `s`, `m`, `h`), with an optional sign, and raises `ValueError` on
anything else; `"0"` alone is allowed.

```python
from assistwire.ratelimit import parse_duration

print(parse_duration("1m30s"))   # 0:01:30
```

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.