from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .models import Topic, TopicListPage, TopicListRequest


class ITopicRepository(ABC):
    @abstractmethod
    def get(self, name: str) -> Optional[Topic]:
        """Find a single topic by name"""

    @abstractmethod
    def list_names(self) -> List[str]:
        """All topic names in the cluster, internal ones included"""

    @abstractmethod
    def find(self, request: TopicListRequest) -> TopicListPage:
        """Search, filter, sort and paginate according to *request*"""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove the topic; raises TopicNotFoundError when it is missing"""

    @abstractmethod
    def purge(self, name: str, partitions: Optional[Iterable[int]] = None) -> int:
        """Clear messages (all partitions when *partitions* is None); returns records removed"""
