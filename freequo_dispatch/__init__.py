"""Freequo side-effect dispatcher.

Reacts to job-application creation and payment confirmation events by
performing exactly one external action per logical event and recording the
outcome on the originating record.
"""
