"""
Core protocols for statplayground.

These define structural interfaces for the collaborators the engine talks
to but does not own. We use Protocol (structural typing) so any callable
with the right shape plugs in: a chat-service client, a canned-answer stub
in tests, or a local model.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Explainer(Protocol):
    """
    Asynchronous conversational explainer.

    Receives a plain-text description of the current parameters and
    results and returns an explanation. Request/response details (model,
    transport, authentication) belong to the implementation.
    """

    async def __call__(self, context: str) -> str:
        """
        Produce an explanation for the given context.

        Args:
            context: Plain-text summary of the current simulation state,
                optionally followed by the user's question

        Returns:
            Explanation text

        Raises:
            Any exception; callers go through request_explanation(),
            which converts failures into a fallback message.
        """
        ...
