import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from topicdeck.domain.models import Topic  # noqa: E402
from topicdeck.infrastructure.repositories import InMemoryTopicRepository  # noqa: E402


def make_topic(name: str, **kwargs) -> Topic:
    kwargs.setdefault("partition_messages", [10] * kwargs.get("partition_count", 1))
    return Topic(name=name, **kwargs)


@pytest.fixture
def topics() -> list[Topic]:
    return [
        make_topic("orders", partition_count=3, partition_messages=[5, 5, 5], out_of_sync_replicas=1),
        make_topic("orders-v2", partition_count=6, partition_messages=[1] * 6),
        make_topic("payments", partition_count=2, partition_messages=[7, 3], out_of_sync_replicas=2),
        make_topic("users", partition_count=1, partition_messages=[4]),
        make_topic("__consumer_offsets", partition_count=50, internal=True, partition_messages=[0] * 50),
        make_topic("_schemas", partition_count=1, partition_messages=[12]),
    ]


@pytest.fixture
def repository(topics) -> InMemoryTopicRepository:
    return InMemoryTopicRepository("local", topics)
