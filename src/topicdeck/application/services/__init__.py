from .topic_list_service import TopicListService
from .topic_list_store import TopicListStore

__all__ = ["TopicListService", "TopicListStore"]
