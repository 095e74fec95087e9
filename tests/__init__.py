"""Tests for the mail relay service."""
