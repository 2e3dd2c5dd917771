from .sqlalchemy_repository import SQLAlchemyRepository

__all__ = ["SQLAlchemyRepository"]
