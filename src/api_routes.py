"""
API Routes - HTTP endpoints for ANSI to HTML conversion
"""

import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup
from sanic import Blueprint, response
from sanic.request import Request
from sanic.response import HTTPResponse

from document_processor import DocumentProcessor

logger = logging.getLogger(__name__)


# Create API blueprint
api_bp = Blueprint("api", url_prefix="/api")


def _string_field(request: Request, field: str) -> Optional[str]:
    """Pull a string field out of a JSON body, or None when missing or invalid"""
    try:
        body: Dict[str, Any] = request.json
    except Exception:  # pylint: disable=broad-exception-caught
        return None

    if not isinstance(body, dict):
        return None
    value = body.get(field)
    return value if isinstance(value, str) else None


@api_bp.route("/health", methods=["GET"])
async def health(_request: Request) -> HTTPResponse:
    """Liveness check"""
    return response.json({"status": "ok"})


@api_bp.route("/convert", methods=["POST"])
async def convert_text(request: Request) -> HTTPResponse:
    """Convert ANSI text to an HTML fragment"""
    text = _string_field(request, "text")
    if text is None:
        return response.json({"error": "Body must be JSON with a string 'text' field"}, status=400)

    try:
        return response.json({"html": request.app.ctx.converter.convert(text)})
    except Exception as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        return response.json({"error": str(e)}, status=500)


@api_bp.route("/strip", methods=["POST"])
async def strip_text(request: Request) -> HTTPResponse:
    """Remove escape sequences and return plain text"""
    text = _string_field(request, "text")
    if text is None:
        return response.json({"error": "Body must be JSON with a string 'text' field"}, status=400)

    try:
        return response.json({"text": request.app.ctx.converter.strip(text)})
    except Exception as e:
        logger.error(f"Strip failed: {e}", exc_info=True)
        return response.json({"error": str(e)}, status=500)


@api_bp.route("/document", methods=["POST"])
async def process_document(request: Request) -> HTTPResponse:
    """Convert every terminal output container in an HTML document"""
    document = _string_field(request, "html")
    if document is None:
        return response.json({"error": "Body must be JSON with a string 'html' field"}, status=400)

    try:
        # Each request is its own document, so handled containers are not shared
        processor = DocumentProcessor(
            converter=request.app.ctx.converter,
            container_tag=request.app.ctx.container_tag,
            processed_class=request.app.ctx.processed_class,
        )
        soup = BeautifulSoup(document, "html.parser")
        converted = processor.process_soup(soup)
        return response.json({"html": str(soup), "converted": converted})
    except Exception as e:
        logger.error(f"Document processing failed: {e}", exc_info=True)
        return response.json({"error": str(e)}, status=500)
