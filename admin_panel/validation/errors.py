from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from admin_panel.core.exceptions import AdminPanelError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    field: Optional[str] = None


class ValidationError(AdminPanelError):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))

    @property
    def field_errors(self) -> Dict[str, str]:
        """First message per field, in the order the issues were raised."""
        errors: Dict[str, str] = {}
        for issue in self.issues:
            key = issue.field or "__all__"
            errors.setdefault(key, issue.message)
        return errors
