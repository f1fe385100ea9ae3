# models.py
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PriorTurn(BaseModel):
    is_user: bool = Field(..., alias="isUser", description="True when the visitor wrote this turn")
    content: str = ""

    model_config = ConfigDict(populate_by_name=True)


class ChatRequest(BaseModel):
    message: Optional[str] = Field(None, description="Visitor message")
    previous_messages: Optional[List[PriorTurn]] = Field(
        None,
        alias="previousMessages",
        description="Earlier turns of this page session, oldest first",
    )

    model_config = ConfigDict(populate_by_name=True)


class ChatResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class ChatInstruction(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class CompletionResult(BaseModel):
    text: str
    tokens_used: Optional[int] = None


class ConversationLogRecord(BaseModel):
    user_message: str
    ai_response: str
    message_length: int
    response_time_ms: int
    tokens_used: Optional[int] = None


class ClientConfig(BaseModel):
    ga_measurement_id: Optional[str] = Field(None, serialization_alias="gaMeasurementId")
