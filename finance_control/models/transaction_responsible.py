# mypy: disable-error-code=name-defined

from __future__ import annotations

from finance_control.extensions.database import db
from finance_control.models.base import AuditedModel


class TransactionResponsible(AuditedModel):
    __tablename__ = "transaction_responsibles"

    name = db.Column(db.String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<TransactionResponsible id={self.id} name={self.name!r}>"
