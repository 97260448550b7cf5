"""Custom exceptions for Realtime Crypto MCP."""


class CryptoMCPError(Exception):
    """Base exception for Realtime Crypto MCP."""

    def __init__(self, message: str, code: str = "CRYPTO_MCP_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
        }


class CoinCapConnectionError(CryptoMCPError):
    """HTTP client unavailable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "COINCAP_CONNECTION_ERROR")


class UnknownToolError(CryptoMCPError):
    """Tool name not registered with the server."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}", "UNKNOWN_TOOL")
        self.name = name

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["tool"] = self.name
        return result


class ToolExecutionError(CryptoMCPError):
    """A tool produced an error result.

    Raised by the stdio server so the MCP layer reports the call with
    ``isError`` set; the message is the tool's error text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, "TOOL_EXECUTION_ERROR")
