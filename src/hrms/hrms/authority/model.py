from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Action, Model, UserType


@dataclass(frozen=True)
class AuthorityDetail:
    """Permission rule: which actions a user type holds on a model."""

    id: str
    user_type: UserType
    model: Model
    authority_content: str
    name: Optional[str] = None

    @property
    def actions(self) -> frozenset[Action]:
        return parse_actions(self.authority_content)

    def permissions(self) -> dict[str, bool]:
        granted = self.actions
        return {action.value: action in granted for action in Action}


def parse_actions(content: str) -> frozenset[Action]:
    """Parse a comma-separated action list; unknown entries are rejected."""

    actions = set()
    for part in (content or "").split(","):
        part = part.strip().lower()
        if part:
            actions.add(Action(part))
    return frozenset(actions)


def format_actions(actions: frozenset[Action]) -> str:
    # Stable order so stored content does not depend on input order.
    return ",".join(a.value for a in Action if a in actions)
