from __future__ import annotations

"""Container type for saved color palettes.

This module defines the :class:`Palette` dataclass and its conversion to
and from the JSON record shape used by :mod:`palette.store`::

    {"id": str, "colors": [str, ...], "theme": str (optional), "createdAt": ISO-8601}
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from util.color import normalize_hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Palette:
    """Named/dated palette.

    Attributes
    ----------
    id:
        Caller-supplied identifier. The store does not enforce uniqueness.
    colors:
        Colors in generation order (primary, secondary, accent,
        background, text).
    theme:
        Optional free-text theme label.
    created_at:
        Timezone-aware creation time.
    """

    id: str
    colors: List[str]
    theme: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)

    def to_record(self) -> Dict[str, Any]:
        """Return the JSON-serializable record for this palette."""
        record: Dict[str, Any] = {"id": self.id, "colors": list(self.colors)}
        if self.theme is not None:
            record["theme"] = self.theme
        record["createdAt"] = _format_timestamp(self.created_at)
        return record

    @classmethod
    def from_record(cls, data: Any) -> "Palette":
        """Rebuild a Palette from its record.

        Raises
        ------
        ValueError
            If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"palette record must be an object, got {type(data).__name__}")
        pid = data.get("id")
        colors = data.get("colors")
        theme = data.get("theme")
        created = data.get("createdAt")
        if not isinstance(pid, str):
            raise ValueError("palette record 'id' must be a string")
        if not isinstance(colors, list) or not all(isinstance(c, str) for c in colors):
            raise ValueError("palette record 'colors' must be a list of strings")
        if theme is not None and not isinstance(theme, str):
            raise ValueError("palette record 'theme' must be a string")
        if not isinstance(created, str):
            raise ValueError("palette record 'createdAt' must be a string")
        return cls(id=pid, colors=list(colors), theme=theme, created_at=_parse_timestamp(created))


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _parse_timestamp(raw: str) -> datetime:
    s = raw.strip()
    # JSON dates written by browsers end in "Z"
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    value = datetime.fromisoformat(s)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def new_palette(
    colors: Sequence[str],
    theme: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Palette:
    """Build a palette ready for saving.

    Colors are canonicalized, a blank theme becomes None and the id is a
    fresh random hex string.
    """
    label = theme.strip() if theme is not None else ""
    return Palette(
        id=uuid.uuid4().hex,
        colors=[normalize_hex(c) for c in colors],
        theme=label or None,
        created_at=created_at if created_at is not None else _utcnow(),
    )
