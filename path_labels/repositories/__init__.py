from path_labels.repositories.common import CommonRepository, default_root

__all__ = [
    "CommonRepository",
    "default_root",
]
