"""Rendered notification content."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RenderedMessage:
    """A fully rendered email, never persisted.

    Attributes:
        sender: Formatted From header ('"Freequo" <no-reply@freequo.app>').
        recipient: Destination address.
        subject: Subject line.
        text: Plain-text body (transport fallback).
        html: Rich HTML body.
    """

    sender: str
    recipient: str
    subject: str
    text: str
    html: str
