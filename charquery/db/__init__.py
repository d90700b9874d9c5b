from .pool import create_pool
from .ddl import ensure_schema
from .repo import CharacterRepo, CharacterRow

__all__ = ["create_pool", "ensure_schema", "CharacterRepo", "CharacterRow"]
