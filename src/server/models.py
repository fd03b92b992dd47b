"""Pydantic models for the JSON-RPC tool surface."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from server.server_config import MAX_VALIDATE_CHARS

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

RequestId = Union[int, str, None]


class JsonRpcRequest(BaseModel):
    """An incoming JSON-RPC call.

    Attributes
    ----------
    jsonrpc : str
        Protocol version; only ``"2.0"`` is accepted.
    method : str
        ``tools/list`` or ``tools/call``.
    params : dict[str, Any] | None
        Method parameters.
    id : int | str | None
        Caller-chosen request identifier, echoed in the response.

    """

    model_config = ConfigDict(extra="allow")

    jsonrpc: str
    method: str
    params: dict[str, Any] | None = None
    id: RequestId = None


class ToolCallParams(BaseModel):
    """Parameters of a ``tools/call`` request."""

    name: str | None = None
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def default_arguments(cls, v: dict[str, Any] | None) -> dict[str, Any]:
        return v or {}


class TextContent(BaseModel):
    """One text item of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Result payload of ``tools/call``.

    Attributes
    ----------
    content : list[TextContent]
        The section text, or the JSON rendering of the structured view.
    isError : bool
        True for the not-found outcome.

    """

    content: list[TextContent]
    isError: bool = False  # noqa: N815 (wire field name)


class JsonRpcError(BaseModel):
    """Error member of a JSON-RPC response."""

    code: int
    message: str


class ValidateRequest(BaseModel):
    """Request model for the /api/validate endpoint."""

    text: str = Field(..., max_length=MAX_VALIDATE_CHARS, description="Raw document text")
