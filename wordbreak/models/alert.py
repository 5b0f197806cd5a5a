"""
Alert Data Models

Contains the payload handed to the host's `send_alert` callback.
"""

from dataclasses import dataclass, asdict
from typing import Dict

ALERT_VARIANTS = ("info", "success", "warning", "danger", "error")


@dataclass(frozen=True)
class Alert:
    """User-visible notification."""
    title: str
    message: str
    variant: str = "info"

    def __post_init__(self):
        if self.variant not in ALERT_VARIANTS:
            raise ValueError(f"Unknown alert variant '{self.variant}'")

    @property
    def severity(self) -> str:
        return self.variant

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
