"""Paginated, searchable topic list controller for Kafka-style clusters."""

__version__ = "0.1.0"
