"""Render the pipeline snapshot email for one of the two sender variants."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from mail_relay.core.clock import Clock, local_now, snapshot_date
from mail_relay.models import SenderType

_TEMPLATES = {
    SenderType.OWNER: ("owner_snapshot.html", "owner_snapshot.txt"),
    SenderType.MANAGER: ("team_snapshot.html", "team_snapshot.txt"),
}


class RenderedTemplate(NamedTuple):
    subject: str
    html_body: str
    text_body: str


class TemplateRenderer:
    """Build subject and bodies from the packaged Jinja templates."""

    def __init__(
        self,
        *,
        templates_path: Optional[Path] = None,
        clock: Clock = local_now,
    ):
        self._templates_path = templates_path or Path(__file__).resolve().parent.parent / "templates"
        self._clock = clock
        self._environment = Environment(
            loader=FileSystemLoader(self._templates_path),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @staticmethod
    def build_subject(sender_type: SenderType, sender_name: str, date_label: str) -> str:
        if sender_type is SenderType.OWNER:
            return f"Your Quarterly Pipeline Snapshot - {date_label}"
        return f"{sender_name}'s Team Pipeline Snapshot - {date_label}"

    def _render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        try:
            template = self._environment.get_template(template_name)
        except TemplateNotFound as exc:  # pragma: no cover - configuration error
            raise RuntimeError(f"Email template '{template_name}' not found") from exc
        return template.render(**context)

    def render(
        self,
        sender_type: SenderType,
        sender_name: Optional[str],
        recipient_name: Optional[str],
    ) -> RenderedTemplate:
        date_label = snapshot_date(self._clock())
        sender_name = sender_name or ""
        context = {
            "sender_name": sender_name,
            "recipient_name": recipient_name or "",
            "date_label": date_label,
        }

        html_template, text_template = _TEMPLATES[sender_type]
        return RenderedTemplate(
            subject=self.build_subject(sender_type, sender_name, date_label),
            html_body=self._render_template(html_template, context),
            text_body=self._render_template(text_template, context),
        )


__all__ = ["TemplateRenderer", "RenderedTemplate"]
