"""Handler layer for HTTP endpoints.

Handlers depend on the PersonStore protocol and the validator,
never on a concrete repository.

Architecture:
    Router -> Handler -> Repository
    (HTTP) -> (Mapping) -> (Data Access)
"""

from .person_handler import DELETED_MESSAGE, PersonHandler

__all__ = [
    "PersonHandler",
    "DELETED_MESSAGE",
]
