# chat models — transcript messages and the chatbot reply

from datetime import datetime
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    id: str
    message: str
    is_user: bool = Field(..., alias="isUser")
    timestamp: datetime

    model_config = {"populate_by_name": True}


class ChatReply(BaseModel):
    reply: str
