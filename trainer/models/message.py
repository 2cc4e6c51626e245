# Role: Single chat-log entry. Stored append-only in Progress.messages and rendered by the presentation layer
# (role + text + optional sender label). Pydantic makes it easy to serialize for the HTTP snapshot.

from __future__ import annotations

import uuid
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "counterpart", "system"]


class Message(BaseModel):
    # Key line: messages are never edited once logged.
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Role
    text: str
    sender: Optional[str] = None

# Sender label for engine-authored lines (connection notices, the closing line before the email).
SYSTEM_SENDER = "System"
