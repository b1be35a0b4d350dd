from typing import Any

from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel, Field

app = FastAPI(title="StubTranslationProvider", version="0.1.0")


class ChatMessage(BaseModel):
    role: str
    content: str


class MessagesRequest(BaseModel):
    model: str
    max_tokens: int = Field(..., gt=0)
    system: str = ""
    temperature: float = 0.3
    messages: list[ChatMessage] = Field(..., min_length=1)


class ChatCompletionsRequest(BaseModel):
    model: str
    messages: list[ChatMessage] = Field(..., min_length=1)
    temperature: float = 0.3
    max_tokens: int = Field(4096, gt=0)


def fake_translation(model: str, messages: list[ChatMessage]) -> str:
    user_text = next((message.content for message in reversed(messages) if message.role == "user"), "")
    return f"[{model}] {user_text}"


@app.post("/v1/messages")
def messages(payload: MessagesRequest, x_api_key: str | None = Header(default=None)) -> dict[str, Any]:
    if not x_api_key:
        raise HTTPException(status_code=401, detail={"type": "authentication_error", "message": "invalid x-api-key"})
    return {
        "id": "msg_stub",
        "type": "message",
        "role": "assistant",
        "model": payload.model,
        "content": [{"type": "text", "text": fake_translation(payload.model, payload.messages)}],
        "stop_reason": "end_turn",
    }


@app.post("/v1/chat/completions")
def chat_completions(
    payload: ChatCompletionsRequest,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail={"type": "invalid_request_error", "message": "Incorrect API key provided"})
    return {
        "id": "chatcmpl-stub",
        "object": "chat.completion",
        "model": payload.model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": fake_translation(payload.model, payload.messages)},
                "finish_reason": "stop",
            }
        ],
    }
