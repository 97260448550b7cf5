"""MCP Server for CoinCap cryptocurrency lookups."""

import asyncio
import os
from typing import Annotated

from mcp.server import Server
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool, ToolAnnotations
from pydantic import Field

from realtime_crypto_mcp.core.config import get_settings
from realtime_crypto_mcp.core.constants import (
    EXCHANGE_DETAILS_TOOL,
    RATES_TOOL,
    SERVER_NAME,
    SERVER_VERSION,
)
from realtime_crypto_mcp.core.container import cleanup, initialize
from realtime_crypto_mcp.core.exceptions import CryptoMCPError, ToolExecutionError, UnknownToolError
from realtime_crypto_mcp.core.logging import get_logger, setup_logging, tool_context
from realtime_crypto_mcp.models.schemas import ToolResult
from realtime_crypto_mcp.tools import get_exchange_details, get_rates

# Initialize logging
settings = get_settings()
setup_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)

# FastMCP server for HTTP mode
mcp = FastMCP(
    name=SERVER_NAME,
    json_response=False,
    stateless_http=True,
)

# Standard Server for stdio mode
app = Server(SERVER_NAME, version=SERVER_VERSION)


TOOL_ANNOTATIONS = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=True,
)


TOOLS = [
    Tool(
        name=EXCHANGE_DETAILS_TOOL,
        description="Get details about a cryptocurrency exchange",
        inputSchema={
            "type": "object",
            "properties": {
                "exchange": {
                    "type": "string",
                    "description": "Exchange ID (e.g., binance, coinbase, kraken)",
                },
            },
            "required": ["exchange"],
        },
        annotations=TOOL_ANNOTATIONS,
    ),
    Tool(
        name=RATES_TOOL,
        description="Get exchange rates for a cryptocurrency",
        inputSchema={
            "type": "object",
            "properties": {
                "currency": {
                    "type": "string",
                    "description": "Cryptocurrency ID (e.g., bitcoin, ethereum, litecoin)",
                },
            },
            "required": ["currency"],
        },
        annotations=TOOL_ANNOTATIONS,
    ),
]


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return TOOLS


async def _call_tool_impl(name: str, arguments: dict) -> ToolResult:
    """Common tool implementation."""
    if name == EXCHANGE_DETAILS_TOOL:
        return await get_exchange_details(exchange=arguments["exchange"])
    elif name == RATES_TOOL:
        return await get_rates(currency=arguments["currency"])
    else:
        raise UnknownToolError(name)


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Route tool calls to appropriate handlers (stdio mode).

    Error results are raised so the MCP layer flags them with ``isError``.
    """
    with tool_context(name):
        logger.info("tool_called", arguments=arguments)

        try:
            result = await _call_tool_impl(name, arguments)
        except CryptoMCPError as e:
            logger.error("tool_error", **e.to_dict())
            raise

        if result.is_error:
            raise ToolExecutionError(result.text)

        logger.info("tool_completed")
    return result.to_text_content()


def _unwrap(result: ToolResult) -> str:
    """Return the text of a tool result, raising ToolError for error results."""
    if result.is_error:
        raise ToolError(result.text)
    return result.text


@mcp.tool(name=EXCHANGE_DETAILS_TOOL, annotations=TOOL_ANNOTATIONS)
async def exchange_details_http(
    exchange: Annotated[
        str,
        Field(description="Exchange ID (e.g., binance, coinbase, kraken)")
    ],
) -> str:
    """Get details about a cryptocurrency exchange.

    Returns name, rank, 24h USD volume, share of total volume, number of
    trading pairs, website and last update time from CoinCap.
    """
    await initialize()
    with tool_context(EXCHANGE_DETAILS_TOOL, transport="http"):
        return _unwrap(await get_exchange_details(exchange=exchange))


@mcp.tool(name=RATES_TOOL, annotations=TOOL_ANNOTATIONS)
async def rates_http(
    currency: Annotated[
        str,
        Field(description="Cryptocurrency ID (e.g., bitcoin, ethereum, litecoin)")
    ],
) -> str:
    """Get exchange rates for a cryptocurrency.

    Returns the symbol, type (crypto or fiat) and current USD rate from CoinCap.
    """
    await initialize()
    with tool_context(RATES_TOOL, transport="http"):
        return _unwrap(await get_rates(currency=currency))


async def run_stdio_server() -> None:
    """Run the MCP server with stdio transport."""
    logger.info("server_starting", version=SERVER_VERSION, transport="stdio")

    try:
        await initialize()

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options(),
            )

    except Exception:
        logger.exception("server_error")
        raise

    finally:
        await cleanup()
        logger.info("server_stopped")


def run_server() -> None:
    """Run the MCP server (auto-detect mode from environment)."""
    transport = os.environ.get("MCP_TRANSPORT", "stdio").lower()

    if transport in ("http", "sse", "streamable"):
        import uvicorn
        from starlette.middleware.cors import CORSMiddleware

        port = int(os.environ.get("PORT", "8080"))
        host = os.environ.get("HOST", "0.0.0.0")

        http_app = mcp.streamable_http_app()
        http_app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["mcp-protocol-version"],
            max_age=86400,
        )

        logger.info("server_starting", version=SERVER_VERSION, transport="http", port=port)
        uvicorn.run(http_app, host=host, port=port)
    else:
        asyncio.run(run_stdio_server())


if __name__ == "__main__":
    run_server()
