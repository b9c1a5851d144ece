"""Postmark adapters - Templated email via the Postmark API."""

from .client import PostmarkEmailSender

__all__ = ["PostmarkEmailSender"]
