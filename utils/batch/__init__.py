from utils.batch.build_batch import BatchBuildOutcome, build_batch
from utils.batch.expand_weekday_patterns import CLOSED_LABEL, expand_weekday_patterns

__all__ = [
    "BatchBuildOutcome",
    "CLOSED_LABEL",
    "build_batch",
    "expand_weekday_patterns",
]
