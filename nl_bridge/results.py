"""
Result records returned by the synthesis flows.

Both records keep snake_case attributes and expose the camelCase wire shape
the model (and tool clients) speak through to_dict().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class QueryResult:
    sql: str = ""
    param_values: List[Any] = field(default_factory=list)
    error: str = ""

    @classmethod
    def from_reply(cls, data: Dict[str, Any]) -> "QueryResult":
        """Merge a parsed model reply onto the default shape."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        params = data.get("paramValues")
        return cls(
            sql=str(data.get("sql") or ""),
            param_values=list(params) if isinstance(params, (list, tuple)) else [],
            error=str(data.get("error") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"sql": self.sql, "paramValues": list(self.param_values), "error": self.error}


@dataclass
class MessageResult:
    status: bool = False
    email_subject: str = ""
    email_body: str = ""
    sms: str = ""
    error: str = ""

    @property
    def email(self) -> str:
        """Subject and body as one block of text."""
        if self.email_subject and self.email_body:
            return f"{self.email_subject}\n\n{self.email_body}"
        return self.email_subject or self.email_body

    def merge_reply(self, data: Dict[str, Any]) -> None:
        """Copy known keys from a parsed model reply; missing keys keep their value."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        if "emailSubject" in data:
            self.email_subject = str(data["emailSubject"] or "")
        if "emailBody" in data:
            self.email_body = str(data["emailBody"] or "")
        if "sms" in data:
            self.sms = str(data["sms"] or "")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "email": self.email,
            "emailSubject": self.email_subject,
            "emailBody": self.email_body,
            "sms": self.sms,
            "error": self.error,
        }
