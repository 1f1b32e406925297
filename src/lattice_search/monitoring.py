"""Sentry error monitoring for applications embedding the search."""

import os
from typing import Optional

import sentry_sdk
from dotenv import find_dotenv, load_dotenv

DEFAULT_TRACES_SAMPLE_RATE = 0.1


def init_sentry(dsn: Optional[str] = None) -> bool:
    """Initialize Sentry error monitoring.

    Reads SENTRY_DSN, ENVIRONMENT and SENTRY_TRACES_SAMPLE_RATE from the
    environment (after loading a .env file) unless a DSN is passed in.

    Args:
        dsn: Explicit DSN; overrides SENTRY_DSN.

    Returns:
        True if Sentry was initialized, False if no DSN is configured.
    """
    load_dotenv(find_dotenv(usecwd=True))

    dsn = dsn or os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    environment = os.getenv("ENVIRONMENT", "development")
    traces_sample_rate = float(
        os.getenv("SENTRY_TRACES_SAMPLE_RATE", DEFAULT_TRACES_SAMPLE_RATE)
    )

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=traces_sample_rate,
        attach_stacktrace=True,
    )

    return True


def capture_exception(exception: Exception = None):
    """Capture an exception and send to Sentry.

    A no-op when Sentry was never initialized.

    Args:
        exception: The exception to capture. If None, captures the current exception.
    """
    sentry_sdk.capture_exception(exception)


def capture_message(message: str, level: str = "info"):
    """Send a message to Sentry.

    Args:
        message: The message to send.
        level: Log level (debug, info, warning, error, fatal).
    """
    sentry_sdk.capture_message(message, level=level)


__all__ = ['init_sentry', 'capture_exception', 'capture_message']
