# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 20:41
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""

from enum import Enum
from typing import TYPE_CHECKING, Tuple

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from telegram import Message


class LanguageCode(str, Enum):
    ZH_CN = "zh-CN"
    """
    简体中文
    """

    EN = "en"
    """
    英语
    """


CacheKey = Tuple[str, str]


class TranslationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_text: str
    source_language: str = Field(default="auto", description="`auto` 表示由语言检测决定")
    target_language: str

    @property
    def cache_key(self) -> CacheKey:
        # 仅由原文与目标语言组成，源语言不参与
        return self.source_text, self.target_language


class SmartTranslation(BaseModel):
    original_text: str
    translated_text: str
    source_language: LanguageCode
    target_language: LanguageCode


class InboundMessage(BaseModel):
    text: str = ""
    chat_id: int
    thread_id: int | None = Field(default=None, description="论坛群组中的话题 ID")
    message_id: int
    sender: str = Field(default="Anonymous", description="username 或 user id")
    reply_text: str | None = Field(default=None, description="被引用消息的文本")

    @classmethod
    def from_telegram(cls, message: "Message") -> "InboundMessage":
        sender = "Anonymous"
        if message.from_user:
            sender = message.from_user.username or str(message.from_user.id)
        elif message.sender_chat:
            sender = message.sender_chat.username or str(message.sender_chat.id)

        reply_text = None
        if message.reply_to_message:
            reply_text = message.reply_to_message.text or message.reply_to_message.caption

        return cls(
            text=message.text or message.caption or "",
            chat_id=message.chat.id,
            thread_id=message.message_thread_id if message.is_topic_message else None,
            message_id=message.message_id,
            sender=sender,
            reply_text=reply_text,
        )

    @property
    def location(self) -> str:
        if self.thread_id:
            return f"chat {self.chat_id} (topic {self.thread_id})"
        return f"chat {self.chat_id}"


class OutgoingReply(BaseModel):
    chat_id: int
    text: str
    thread_id: int | None = None
    reply_to_message_id: int | None = None
    parse_mode: str | None = None

    def to_send_kwargs(self) -> dict:
        kwargs = {"chat_id": self.chat_id, "text": self.text}
        if self.thread_id:
            kwargs["message_thread_id"] = self.thread_id
        if self.reply_to_message_id:
            kwargs["reply_to_message_id"] = self.reply_to_message_id
        if self.parse_mode:
            kwargs["parse_mode"] = self.parse_mode
        return kwargs
