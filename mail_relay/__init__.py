"""Relay pipeline snapshot PDFs to recipients through SendGrid."""

__version__ = "1.0.0"
