"""
Requests to the external explainer.

The explainer is an opaque async collaborator, (context: str) -> str.
Failures there must never take the panel down, so they are logged and
replaced with a fallback message the UI can show.
"""

from __future__ import annotations

import logging

from statplayground.core.protocols import Explainer

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "Sorry, I couldn't produce an explanation right now. Please try again."


async def request_explanation(
    explainer: Explainer,
    context: str,
    *,
    fallback: str = DEFAULT_FALLBACK,
) -> str:
    """
    Ask the explainer about the given context.

    Args:
        explainer: Async callable taking the context text
        context: Text from one of the context builders
        fallback: Message returned if the explainer fails

    Returns:
        The explainer's text, or fallback on any exception or a
        non-string / empty reply
    """
    logger.debug(f"Requesting explanation ({len(context)} chars of context)")
    try:
        reply = await explainer(context)
    except Exception as e:
        logger.error(f"Explainer request failed: {e}")
        return fallback

    if not isinstance(reply, str) or not reply.strip():
        logger.warning("Explainer returned an empty or non-text reply")
        return fallback
    return reply
