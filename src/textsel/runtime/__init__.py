"""Logging, diagnostics and configuration shared across textsel."""
