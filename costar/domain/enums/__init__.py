from costar.domain.enums.credit_type import CreditType
from costar.domain.enums.collaboration_type import CollaborationType
from costar.domain.enums.path_error_kind import PathErrorKind
__all__ = [
    "CreditType",
    "CollaborationType",
    "PathErrorKind",
]
