from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Redactor:
    """Masks addresses in CLI output.

    MAC suffixes are replaced by a per-run counter so that distinct peers
    stay distinguishable in the same table.
    """

    enabled: bool = True
    _mac_ids: dict[str, int] = field(default_factory=dict)

    def ip(self, value: str | None) -> str:
        if not value:
            return ""
        if not self.enabled:
            return value
        octets = value.split(".")
        if len(octets) == 4 and all(octet.isdigit() for octet in octets):
            return f"x.x.x.{octets[3]}"
        return value

    def mac(self, value: str) -> str:
        if not self.enabled or value.count(":") != 5:
            return value
        index = self._mac_ids.setdefault(value, len(self._mac_ids) + 1)
        return f"{value[:8]}:xx:xx:{index:02d}"
