from .types import (
    SingleObjectiveResultSet,
    ValidatedSingleObjectiveResultSet,
    has_validation,
)

__all__ = [
    "SingleObjectiveResultSet",
    "ValidatedSingleObjectiveResultSet",
    "has_validation",
]
