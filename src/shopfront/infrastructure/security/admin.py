"""Administrator rule: membership in a configured set of emails."""

from __future__ import annotations

from typing import Iterable

from shopfront.application.ports import AdminPolicy, Identity


class EmailAdminPolicy(AdminPolicy):

    def __init__(self, admin_emails: Iterable[str]) -> None:
        self._admin_emails = frozenset(e.strip().lower() for e in admin_emails if e.strip())

    def is_admin(self, identity: Identity) -> bool:
        return identity.email.lower() in self._admin_emails
