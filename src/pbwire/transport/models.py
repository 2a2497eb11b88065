"""Pydantic models for the packet transport.

This module defines the validated shapes exchanged with the host RPC: the
chat peer a message is addressed to, and the reply of a send_packet call.
"""

from __future__ import annotations

from typing import Optional, cast

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Target(BaseModel):
    """Chat peer addressed by an outgoing message.

    A group takes precedence over a user when both are set, matching a
    group session that also knows the sending user.

    Attributes:
        group_id: Group (guild) identifier
        user_id: User identifier for private messages

    Example:
        >>> Target(group_id=123456).peer_id
        123456
        >>> Target(user_id=42).is_group
        False
    """

    model_config = ConfigDict(frozen=True)

    group_id: Optional[int] = Field(default=None, ge=0)
    user_id: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _require_peer(self) -> Target:
        if self.group_id is None and self.user_id is None:
            raise ValueError("Target requires group_id or user_id")
        return self

    @property
    def is_group(self) -> bool:
        return self.group_id is not None

    @property
    def peer_id(self) -> int:
        if self.group_id is not None:
            return self.group_id
        return cast(int, self.user_id)


class PacketResponse(BaseModel):
    """Reply of the host ``send_packet`` RPC.

    Only ``data`` is interpreted; any other keys the host returns are kept.
    An empty ``data`` string is treated as absent.
    """

    model_config = ConfigDict(extra="allow")

    data: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return bool(self.data)
