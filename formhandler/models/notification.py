"""Notification-related Pydantic models"""
from pydantic import BaseModel
from typing import List


class EmailNotification(BaseModel):
    """Submission email handed to the mail provider"""
    from_address: str
    to_addresses: List[str]
    subject: str
    html_content: str
    text_content: str = ""


class ChatNotification(BaseModel):
    """Message posted to the chat webhook"""
    channel: str
    text: str
