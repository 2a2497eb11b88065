"""Configuration for the long-message service."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

STORE_COMMAND = "trpc.group.long_msg_interface.MsgService.SsoSendLongMsg"
RETRIEVE_COMMAND = "trpc.group.long_msg_interface.MsgService.SsoRecvLongMsg"


class LongMessageConfig(BaseModel):
    """Settings for storing and retrieving long messages.

    The metadata blocks are read-only views, so a config shared between
    services cannot be changed in place.

    Attributes:
        store_command: Remote command persisting a compressed payload
        retrieve_command: Remote command fetching a payload by resource id
        envelope_label: Label written into the payload envelope
        compression_level: gzip level for stored payloads (0-9)
        store_metadata: Fixed metadata block of store requests (tag 15)
        retrieve_metadata: Fixed metadata block of retrieve requests (tag 15)

    Example:
        >>> LongMessageConfig(compression_level=9).store_command
        'trpc.group.long_msg_interface.MsgService.SsoSendLongMsg'
    """

    model_config = ConfigDict(frozen=True)

    store_command: str = STORE_COMMAND
    retrieve_command: str = RETRIEVE_COMMAND
    envelope_label: str = "MultiMsg"
    compression_level: int = Field(default=6, ge=0, le=9)
    store_metadata: Mapping[int, int] = Field(
        default_factory=lambda: {1: 4, 2: 2, 3: 9, 4: 0}, validate_default=True
    )
    retrieve_metadata: Mapping[int, int] = Field(
        default_factory=lambda: {1: 2, 2: 0, 3: 0, 4: 0}, validate_default=True
    )

    @field_validator("store_metadata", "retrieve_metadata", mode="after")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[int, int]) -> Mapping[int, int]:
        return MappingProxyType(dict(value))
