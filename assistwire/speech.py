"""Text-to-speech endpoint request building."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from assistwire.endpoint import ApiRequest, omit_empty


class SpeechModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"
    CANARY = "canary-tts"


class SpeechVoice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class CreateSpeechRequest:
    """Speech request; ``response_format`` defaults to mp3 and ``speed`` to 1.0 server-side."""

    model: SpeechModel | str
    input: str
    voice: SpeechVoice | str
    response_format: SpeechResponseFormat | str = ""
    speed: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        body = {
            "model": _text(self.model),
            "input": self.input,
            "voice": _text(self.voice),
        }
        body.update(
            omit_empty(
                {
                    "response_format": _text(self.response_format),
                    "speed": self.speed,
                }
            )
        )
        return body


def speech_request(request: CreateSpeechRequest) -> ApiRequest:
    """Describe the POST /audio/speech call; the response body is raw audio."""
    return ApiRequest(
        method="POST",
        path="/audio/speech",
        body=request.to_dict(),
        model=_text(request.model),
        content_type="application/json",
    )