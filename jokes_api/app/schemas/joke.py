"""
Pydantic models for joke data.

A joke record is exposed with the camel‑cased field names ``jokeText``
and ``jokeType``.  Both may be ``null``: records created or replaced
without a text or type keep the missing value as ``None``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Joke(BaseModel):
    """Schema for a stored joke record."""

    id: int = Field(..., examples=[1])
    jokeText: Optional[str] = Field(
        None, examples=["Why don't scientists trust atoms? Because they make up everything."]
    )
    jokeType: Optional[str] = Field(None, examples=["Science"])


class JokeForm(BaseModel):
    """Form fields accepted by the create and update endpoints.

    Values are kept exactly as sent; an absent field is ``None``.
    """

    text: Optional[str] = None
    type: Optional[str] = None


class MessageResponse(BaseModel):
    """Schema for plain status and error messages."""

    message: str = Field(..., examples=["Joke deleted"])
