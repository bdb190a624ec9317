"""User-facing message catalogs.

Every text the service renders (validation errors, report lines, status
labels) comes from one of these catalogs, selected by locale.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, TypeAlias

from .models import UserStatus

Locale: TypeAlias = Literal["en", "pt_BR"]


@dataclass(frozen=True)
class Messages:
    """Rendered texts for a single locale."""

    required_fields: str
    underage: str
    report_header: str
    report_empty: str
    status_active: str
    status_inactive: str
    admin_marker: str

    def status_label(self, status: UserStatus) -> str:
        if status == UserStatus.ACTIVE:
            return self.status_active
        return self.status_inactive


ENGLISH = Messages(
    required_fields="Name, email and age are required.",
    underage="User must be an adult.",
    report_header="--- User Report ---",
    report_empty="No users registered.",
    status_active="active",
    status_inactive="inactive",
    admin_marker="admin",
)

PORTUGUESE = Messages(
    required_fields="Nome, email e idade são obrigatórios.",
    underage="O usuário deve ser maior de idade.",
    report_header="--- Relatório de Usuários ---",
    report_empty="Nenhum usuário cadastrado.",
    status_active="ativo",
    status_inactive="inativo",
    admin_marker="administrador",
)

CATALOGS = MappingProxyType({"en": ENGLISH, "pt_BR": PORTUGUESE})


def get_messages(locale: str = "en") -> Messages:
    """Return the catalog for ``locale``.

    Raises:
        ValueError: If no catalog exists for the locale.
    """
    try:
        return CATALOGS[locale]
    except KeyError as exc:
        supported = ", ".join(sorted(CATALOGS))
        raise ValueError(f"Unsupported locale '{locale}' (supported: {supported})") from exc
