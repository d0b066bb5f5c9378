"""
FastAPI REST API Module

HTTP harness around the arithmetic engine. Operands travel as decimal
strings and results come back as canonical decimal strings, so values of any
size survive JSON unchanged.
"""

from typing import List

from fastapi import Depends, FastAPI, HTTPException, status
from pydantic import BaseModel, Field
import uvicorn

from . import __version__
from .adder import add, subtract
from .config import BigIntegerConfig, get_config, input_too_long
from .integer import BigInteger
from .logging_config import get_logger, log_action
from .multiplier import multiply
from .parser import FormatError, parse


logger = get_logger("bigint.api")


# Pydantic models for API requests/responses
class ParseRequest(BaseModel):
    value: str = Field(..., description="Integer string, e.g. '-0012'")


class ParseResponse(BaseModel):
    value: str = Field(..., description="Canonical decimal string")
    negative: bool
    num_digits: int = Field(..., ge=0, description="Significant digit count, 0 for zero")


class BinaryOperationRequest(BaseModel):
    first: str = Field(..., description="First integer string")
    second: str = Field(..., description="Second integer string")


class OperationResponse(BaseModel):
    result: str = Field(..., description="Canonical decimal string")


def _parse_operands(operation: str, texts: List[str], settings: BigIntegerConfig) -> List[BigInteger]:
    for text in texts:
        if input_too_long(text, settings):
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Operand longer than {settings.max_input_length} characters"
            )

    try:
        return [parse(text) for text in texts]
    except FormatError as e:
        log_action(logger, "warning", f"Rejected operand: {e.reason}",
                   action="api", operation=operation)
        raise HTTPException(status_code=400, detail=f"Incorrect format: {e.reason}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Big Integer API",
        description="Arbitrary-precision integer parsing, addition and multiplication",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "big_integer_api",
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Big Integer API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "parse": "/parse",
                "add": "/add",
                "subtract": "/subtract",
                "multiply": "/multiply"
            }
        }

    @app.post("/parse", response_model=ParseResponse)
    def parse_integer(request: ParseRequest, settings: BigIntegerConfig = Depends(get_config)):
        """Parse an integer string into its canonical form"""
        value, = _parse_operands("parse", [request.value], settings)
        log_action(logger, "info", "Parsed integer", action="api", operation="parse")
        return ParseResponse(value=str(value), negative=value.negative, num_digits=value.length)

    @app.post("/add", response_model=OperationResponse)
    def add_integers(request: BinaryOperationRequest, settings: BigIntegerConfig = Depends(get_config)):
        """Sum of two integers"""
        first, second = _parse_operands("add", [request.first, request.second], settings)
        log_action(logger, "info", "Computed add", action="api", operation="add",
                   operands=[request.first, request.second])
        return OperationResponse(result=str(add(first, second)))

    @app.post("/subtract", response_model=OperationResponse)
    def subtract_integers(request: BinaryOperationRequest, settings: BigIntegerConfig = Depends(get_config)):
        """Difference first - second"""
        first, second = _parse_operands("subtract", [request.first, request.second], settings)
        log_action(logger, "info", "Computed subtract", action="api", operation="subtract",
                   operands=[request.first, request.second])
        return OperationResponse(result=str(subtract(first, second)))

    @app.post("/multiply", response_model=OperationResponse)
    def multiply_integers(request: BinaryOperationRequest, settings: BigIntegerConfig = Depends(get_config)):
        """Product of two integers"""
        first, second = _parse_operands("multiply", [request.first, request.second], settings)
        log_action(logger, "info", "Computed multiply", action="api", operation="multiply",
                   operands=[request.first, request.second])
        return OperationResponse(result=str(multiply(first, second)))

    return app


app = create_app()


def run_server(host: str = "127.0.0.1", port: int = 8095, debug: bool = False):
    """Run the FastAPI server"""
    uvicorn.run(
        "big_integer.api:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info"
    )
