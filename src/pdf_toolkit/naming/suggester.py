"""
Module: naming.suggester

Purpose:
    Ask a vision-capable LLM for a short filename describing an image.
    Best effort only: any failure is logged and replaced by a fixed default
    name, so the compose workflow never depends on the service.

Key Functions:
    - suggest_filename(): Image bytes -> lowercase_underscore name (async)
    - normalize_suggestion(): Clean a raw model answer

Dependencies:
    - litellm: Provider-agnostic async completion API

Used By:
    - pdf_toolkit.session: suggest_filename for the image list
    - pdf_toolkit.cli: images-to-pdf --suggest-name
"""

from __future__ import annotations

import asyncio
import base64
import logging
import re
from typing import Any, Optional

from litellm import acompletion

from pdf_toolkit.core.errors import ExternalServiceError, InvalidConfigurationError

from .config import NamingConfig

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTED_FILENAME = "my_document"

NAMING_PROMPT = (
    "Look at this image and suggest a professional, concise filename "
    "(maximum 4 words) for a PDF document containing such content. "
    "Return ONLY the suggested filename without extension."
)


async def suggest_filename(
    content: bytes,
    mime_type: str,
    *,
    config: Optional[NamingConfig] = None,
) -> str:
    """
    Suggest a filename for a document built from this image.

    Never raises: service errors, timeouts and empty answers all yield
    DEFAULT_SUGGESTED_FILENAME.

    Args:
        content: Encoded image bytes
        mime_type: MIME type of content, e.g. "image/jpeg"
        config: Model settings; defaults to NamingConfig.from_env()

    Returns:
        Lowercase name with whitespace replaced by underscores

    Example:
        >>> await suggest_filename(jpeg_bytes, "image/jpeg")
        'quarterly_sales_report'
    """
    if config is None:
        try:
            config = NamingConfig.from_env()
        except InvalidConfigurationError as e:
            logger.warning(f"Filename suggestion misconfigured, using default: {e}")
            return DEFAULT_SUGGESTED_FILENAME
    if not config.enabled:
        return DEFAULT_SUGGESTED_FILENAME

    try:
        answer = await _request_suggestion(content, mime_type, config)
    except ExternalServiceError as e:
        logger.warning(f"Filename suggestion unavailable, using default: {e}")
        return DEFAULT_SUGGESTED_FILENAME

    suggestion = normalize_suggestion(answer)
    if not suggestion:
        logger.warning("Filename suggestion was empty, using default")
        return DEFAULT_SUGGESTED_FILENAME
    logger.info(f"Suggested filename: {suggestion}")
    return suggestion


def normalize_suggestion(answer: Optional[str]) -> str:
    """
    Turn a raw model answer into a filename stem.

    Example:
        >>> normalize_suggestion("  Quarterly Sales Report\\n")
        'quarterly_sales_report'
    """
    if not answer:
        return ""
    return re.sub(r"\s+", "_", answer.strip()).lower()


async def _request_suggestion(content: bytes, mime_type: str, config: NamingConfig) -> str:
    """
    Send one image to the model and return its raw answer.

    Raises:
        ExternalServiceError: On any provider error or timeout
    """
    messages = _build_messages(content, mime_type)
    try:
        response = await asyncio.wait_for(
            acompletion(model=config.model, messages=messages, timeout=config.timeout),
            timeout=config.timeout,
        )
    except asyncio.TimeoutError as e:
        raise ExternalServiceError(f"No answer within {config.timeout}s") from e
    except Exception as e:  # Any other provider/client failure is non-fatal
        raise ExternalServiceError(f"{type(e).__name__}: {e}") from e

    try:
        return response.choices[0].message.content or ""
    except (AttributeError, IndexError) as e:
        raise ExternalServiceError(f"Unexpected response shape: {e}") from e


def _build_messages(content: bytes, mime_type: str) -> list[dict[str, Any]]:
    """Chat messages with the prompt and the image as a base64 data URL."""
    encoded = base64.b64encode(content).decode("ascii")
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": NAMING_PROMPT},
                {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}},
            ],
        }
    ]
