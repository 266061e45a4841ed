"""Coach chat history with an explicit lifecycle: load (seeding a greeting), append, clear."""

from __future__ import annotations

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitcoach.core.enums import ChatRole
from fitcoach.models.chat import ChatMessage
from fitcoach.schemas.coach import ChatMessageRead

GREETING = (
    "Hi! I'm your AI personal trainer. I can help with personalised routines, "
    "technique tips, nutrition and motivation. How can I help you today?"
)


class ChatHistoryRepository:
    def __init__(self, db: AsyncSession, user_id: uuid.UUID):
        self.db = db
        self.user_id = user_id

    async def load(self) -> list[ChatMessageRead]:
        """Conversation oldest first; an empty history is seeded with the greeting."""
        result = await self.db.execute(
            select(ChatMessage)
            .where(ChatMessage.user_id == self.user_id)
            .order_by(ChatMessage.created_at)
        )
        messages = [ChatMessageRead.model_validate(m) for m in result.scalars().all()]
        if not messages:
            messages = [await self.append(ChatRole.AI, GREETING)]
        return messages

    async def append(self, role: ChatRole, message: str) -> ChatMessageRead:
        row = ChatMessage(user_id=self.user_id, role=role, message=message)
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return ChatMessageRead.model_validate(row)

    async def clear(self) -> list[ChatMessageRead]:
        """Drop the conversation and start over from the greeting."""
        await self.db.execute(delete(ChatMessage).where(ChatMessage.user_id == self.user_id))
        return [await self.append(ChatRole.AI, GREETING)]
