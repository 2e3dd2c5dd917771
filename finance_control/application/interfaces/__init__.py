from .entity_mapper import EntityMapper
from .repository import Repository

__all__ = ["EntityMapper", "Repository"]
