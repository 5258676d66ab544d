from .core import Topic, TopicListPage, TopicRef
from .query import SortOrder, SortSpec, TopicColumnsToSort, TopicListRequest

__all__ = [
    "SortOrder",
    "SortSpec",
    "Topic",
    "TopicColumnsToSort",
    "TopicListPage",
    "TopicListRequest",
    "TopicRef",
]
