"""Adyen payment result verification."""

import asyncio
import inspect
import logging
from typing import Any, Callable, Mapping, Optional

from .signer import HmacSigner
from .types import Logger, PaymentResult


class NotificationVerifier:
    """
    Verifies signed payment results and passes them to a handler.

    Example:
        >>> verifier = NotificationVerifier(HmacSigner(secret_hex))
        >>>
        >>> @verifier.on_notification
        >>> def handle_result(result):
        ...     print(f"Payment {result.psp_reference}: {result.auth_result}")
        >>>
        >>> verifier.handle_notification(request_params)
    """

    def __init__(
        self,
        signer: HmacSigner,
        logger: Optional[Logger] = None
    ):
        """
        Initialize NotificationVerifier.

        Args:
            signer: Signer configured with the skin's HMAC key
            logger: Custom logger instance
        """
        if signer is None:
            raise ValueError("signer is required")

        self.signer = signer
        self.logger = logger or logging.getLogger(__name__)

        self._notification_handler: Optional[Callable] = None

    def on_notification(self, handler: Callable[[PaymentResult], Any]):
        """
        Register payment result handler (decorator).

        Example:
            >>> @verifier.on_notification
            >>> async def handle(result):
            ...     print(result.auth_result)
        """
        self._notification_handler = handler
        return handler

    def verify(self, fields: Mapping[str, str]) -> bool:
        """Check ``fields["merchantSig"]`` against the other fields."""
        return self.signer.verify_fields(fields)

    def handle_notification(self, fields: Mapping[str, str]) -> bool:
        """
        Handle a payment result.

        Async handlers are run to completion with ``asyncio.run``; inside a
        running event loop use :meth:`handle_notification_async` instead.

        Args:
            fields: Result fields as received, including ``merchantSig``

        Returns:
            True if the result was valid and processed

        Raises:
            RuntimeError: If an async handler is registered and an event
                loop is already running
        """
        if inspect.iscoroutinefunction(self._notification_handler) and _loop_running():
            raise RuntimeError(
                "handle_notification() cannot run an async handler inside a running "
                "event loop; await handle_notification_async() instead"
            )

        result = self._verified_result(fields)
        if result is None:
            return False

        if not self._notification_handler:
            self.logger.warning("No payment result handler registered")
            return True

        try:
            outcome = self._notification_handler(result)
            if asyncio.iscoroutine(outcome):
                if _loop_running():
                    outcome.close()
                    raise RuntimeError("Async payment result handler called from a running event loop")
                outcome = asyncio.run(outcome)
        except Exception as e:
            self.logger.error(f"Payment result handler error: {e}")
            return False

        return outcome is not False

    async def handle_notification_async(self, fields: Mapping[str, str]) -> bool:
        """
        Handle a payment result from async code.

        Sync and async handlers are both accepted; coroutine results are awaited.

        Args:
            fields: Result fields as received, including ``merchantSig``

        Returns:
            True if the result was valid and processed
        """
        result = self._verified_result(fields)
        if result is None:
            return False

        if not self._notification_handler:
            self.logger.warning("No payment result handler registered")
            return True

        try:
            outcome = self._notification_handler(result)
            if asyncio.iscoroutine(outcome):
                outcome = await outcome
        except Exception as e:
            self.logger.error(f"Payment result handler error: {e}")
            return False

        return outcome is not False

    def _verified_result(self, fields: Mapping[str, str]) -> Optional[PaymentResult]:
        if not self.verify(fields):
            self.logger.warning("Invalid payment result signature")
            return None

        result = PaymentResult.from_fields(fields)
        self.logger.debug(f"Verified payment result: {result.psp_reference}")
        return result


def _loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True
