"""Tests for the snapshot email templates."""

from datetime import datetime

import pytest

from mail_relay.core.clock import snapshot_date
from mail_relay.models import SenderType
from mail_relay.services import TemplateRenderer


class TestSenderType:
    def test_owner_is_exact_match(self):
        assert SenderType.resolve("owner") is SenderType.OWNER

    @pytest.mark.parametrize("value", ["manager", "Owner", "director", "", None])
    def test_everything_else_is_manager(self, value):
        assert SenderType.resolve(value) is SenderType.MANAGER


class TestSnapshotDate:
    def test_abbreviated_month_without_padding(self):
        assert snapshot_date(datetime(2025, 1, 5)) == "Jan 5, 2025"

    def test_two_digit_day(self):
        assert snapshot_date(datetime(2024, 12, 31, 23, 59)) == "Dec 31, 2024"


class TestTemplateRenderer:
    def test_owner_variant(self, renderer: TemplateRenderer):
        rendered = renderer.render(SenderType.OWNER, "Alex", "Pat")

        assert rendered.subject == "Your Quarterly Pipeline Snapshot - Jan 5, 2025"
        assert "Hi Pat," in rendered.html_body
        assert "Your current quota status" in rendered.html_body
        assert "Team quota status" not in rendered.html_body
        assert "Hi Pat," in rendered.text_body

    def test_manager_variant(self, renderer: TemplateRenderer):
        rendered = renderer.render(SenderType.MANAGER, "Alex", "Pat")

        assert rendered.subject == "Alex's Team Pipeline Snapshot - Jan 5, 2025"
        assert "Alex's Team Pipeline Snapshot" in rendered.html_body
        assert "At-risk team members and their status" in rendered.html_body
        assert rendered.text_body.startswith("Alex's Team Pipeline Snapshot - Jan 5, 2025")

    def test_rendering_is_deterministic_for_a_fixed_clock(self, renderer: TemplateRenderer):
        first = renderer.render(SenderType.MANAGER, "Alex", "Pat")
        second = renderer.render(SenderType.MANAGER, "Alex", "Pat")
        assert first == second

    def test_date_comes_from_the_clock(self):
        renderer = TemplateRenderer(clock=lambda: datetime(2026, 3, 14, 8, 0))
        rendered = renderer.render(SenderType.OWNER, "Alex", "Pat")
        assert rendered.subject.endswith("Mar 14, 2026")

    def test_names_are_escaped_in_html(self, renderer: TemplateRenderer):
        rendered = renderer.render(SenderType.OWNER, "Alex", "<b>Pat</b>")

        assert "<b>Pat</b>" not in rendered.html_body
        assert "&lt;b&gt;Pat&lt;/b&gt;" in rendered.html_body

    def test_quote_in_sender_name_is_escaped_in_html(self, renderer: TemplateRenderer):
        rendered = renderer.render(SenderType.MANAGER, "O'Brien", "Pat")

        assert "O&#39;Brien's Team Pipeline Snapshot" in rendered.html_body
        assert rendered.subject == "O'Brien's Team Pipeline Snapshot - Jan 5, 2025"
        assert rendered.text_body.startswith("O'Brien's Team Pipeline Snapshot")

    def test_missing_names_render_empty(self, renderer: TemplateRenderer):
        rendered = renderer.render(SenderType.MANAGER, None, None)

        assert rendered.subject == "'s Team Pipeline Snapshot - Jan 5, 2025"
        assert "Hi ," in rendered.html_body
