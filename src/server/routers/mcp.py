"""JSON-RPC endpoint exposing the profile sections as tools."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from daemonmd.access import AccessLevel
from daemonmd.exceptions import DaemonmdError, InvalidArgumentsError
from daemonmd.sources import DocumentSource
from server.dependencies import get_document_source, get_requester_level
from server.models import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    JsonRpcError,
    JsonRpcRequest,
    RequestId,
    ToolCallParams,
)
from server.tool_processor import list_tools, process_tool_call

router = APIRouter()


def rpc_result(result: Any, request_id: RequestId) -> JSONResponse:
    return JSONResponse({"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id})


def rpc_error(code: int, message: str, request_id: RequestId) -> JSONResponse:
    error = JsonRpcError(code=code, message=message)
    return JSONResponse({"jsonrpc": JSONRPC_VERSION, "error": error.model_dump(), "id": request_id})


@router.post("/")
@router.post("/mcp")
async def mcp_endpoint(
    request: Request,
    requester: AccessLevel = Depends(get_requester_level),
    source: DocumentSource = Depends(get_document_source),
) -> JSONResponse:
    """Handle one JSON-RPC 2.0 call.

    **Methods**

    - **tools/list**: the tool catalogue
    - **tools/call**: run one tool against the caller's filtered view

    Errors are always answered with HTTP 200 and a JSON-RPC ``error`` member.
    Document failures (unreadable, malformed, or insecure) all map to one
    generic internal error so callers learn nothing about the content.
    """
    try:
        body = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError):
        return rpc_error(PARSE_ERROR, "Parse error", None)

    try:
        call = JsonRpcRequest.model_validate(body)
    except ValidationError:
        request_id = body.get("id") if isinstance(body, dict) else None
        return rpc_error(INVALID_REQUEST, "Invalid Request", request_id)

    if call.jsonrpc != JSONRPC_VERSION:
        return rpc_error(INVALID_REQUEST, "Invalid Request", call.id)

    if call.method == "tools/list":
        return rpc_result(list_tools(), call.id)

    if call.method != "tools/call":
        logger.bind(method=call.method).debug("Unknown JSON-RPC method")
        return rpc_error(METHOD_NOT_FOUND, "Method not found", call.id)

    try:
        params = ToolCallParams.model_validate(call.params or {})
    except ValidationError:
        return rpc_error(INVALID_PARAMS, "Invalid params", call.id)
    if not params.name:
        return rpc_error(INVALID_PARAMS, "Invalid params: missing tool name", call.id)

    try:
        result = await process_tool_call(source, requester, params.name, params.arguments)
    except InvalidArgumentsError as exc:
        return rpc_error(INVALID_PARAMS, str(exc), call.id)
    except DaemonmdError as exc:
        logger.bind(error_type=type(exc).__name__).warning("Answering tool call with a generic document error")
        return rpc_error(INTERNAL_ERROR, "Document unavailable", call.id)

    return rpc_result(result.model_dump(), call.id)
