from .config import ProviderKind, ProviderDefaults, ProviderConfig
from .review import ReviewRequest, ReviewResult, CommentThread

__all__ = [
    "ProviderKind",
    "ProviderDefaults",
    "ProviderConfig",
    "ReviewRequest",
    "ReviewResult",
    "CommentThread",
]
