from .memory_topic_repository import InMemoryTopicRepository, load_topics_json, save_topics_json

__all__ = ["InMemoryTopicRepository", "load_topics_json", "save_topics_json"]
