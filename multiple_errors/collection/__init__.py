from .collect import collect_partitioned, collect_partitioned_w, collect_partitionedM
from .fail_all import fail_all, fail_all_list, fail_all_w

__all__ = (
    # Result
    "collect_partitioned",
    "fail_all",
    "fail_all_list",
    # WriterResult
    "collect_partitioned_w",
    "fail_all_w",
    # Generic
    "collect_partitionedM",
)
