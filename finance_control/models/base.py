from finance_control.extensions.database import db


class AuditedModel(db.Model):
    """Abstract base for persisted entities.

    ``created_at``/``updated_at`` are stamped by the repository on save,
    not by column defaults.
    """

    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, nullable=False)
    updated_at = db.Column(db.DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"
