import uuid

import pytest

from iqtqueue.datatypes import GameplayTag, QueueItem
from iqtqueue.internal import (
    CapacityError,
    InvalidItemError,
    PriorityQueueInternal,
    validate_data,
)


def make(name, priority=0, is_open=False, tag="Ability.Act"):
    return QueueItem(
        name=name,
        ability_trigger_tag=GameplayTag(tag),
        priority=priority,
        is_open=is_open,
    )


def test_validate_data():
    assert validate_data(make("a"))
    assert not validate_data(QueueItem(name="a"))
    assert not validate_data(QueueItem(ability_trigger_tag=GameplayTag("T")))


def test_enqueue_invalid_raises():
    q = PriorityQueueInternal()
    with pytest.raises(InvalidItemError):
        q.enqueue(QueueItem(name="a"))
    assert q.is_empty()


def test_dequeue_in_priority_order():
    q = PriorityQueueInternal()
    items = [make("c", 3), make("a", 1), make("b", 2)]
    for item in items:
        q.enqueue(item)
    out = [q.dequeue() for _ in range(len(items))]
    assert [i.priority for i in out] == sorted(i.priority for i in items)
    assert q.is_empty()


def test_equal_priority_newest_first():
    q = PriorityQueueInternal()
    first = make("first", 4)
    second = make("second", 4)
    q.enqueue(first)
    q.enqueue(second)
    assert q.dequeue() is second
    assert q.dequeue() is first


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueueInternal().dequeue()


def test_default_capacity():
    q = PriorityQueueInternal()
    assert q.max_size == 300
    for n in range(300):
        q.enqueue(make(f"n{n}", n))
    with pytest.raises(CapacityError):
        q.enqueue(make("extra"))
    assert len(q) == 300


def test_max_size_ignores_non_positive():
    q = PriorityQueueInternal(max_size=2)
    q.max_size = 0
    assert q.max_size == 2
    q.enqueue(make("a"))
    q.enqueue(make("b"))
    with pytest.raises(CapacityError):
        q.enqueue(make("c"))


def test_contains_and_remove():
    q = PriorityQueueInternal()
    item = make("a", 1)
    q.enqueue(item)
    q.enqueue(make("b", 2))
    probe = make("a", 99)
    assert q.contains(probe)
    q.remove(probe)
    assert not q.contains(item)
    assert [i.name for i in q] == ["b"]
    with pytest.raises(ValueError):
        q.remove(probe)


def test_find_by_task_id():
    q = PriorityQueueInternal()
    item = make("a")
    q.enqueue(item)
    assert q.find_by_task_id(item.task_id) is item
    assert q.find_by_task_id(uuid.uuid4()) is None


def test_find_by_hash_key():
    q = PriorityQueueInternal()
    item = make("a", is_open=True)
    q.enqueue(item)
    assert q.find_by_hash_key("a", GameplayTag("Ability.Act"), True) is item
    assert q.find_by_hash_key("a", GameplayTag("Ability.Act"), False) is None
    assert q.find_by_hash_key("a", GameplayTag("Ability"), True) is None


def test_open_closed_counts_sum_to_length():
    q = PriorityQueueInternal()
    q.enqueue(make("a", is_open=True))
    q.enqueue(make("b", is_open=False))
    q.enqueue(make("c", is_open=True))
    assert q.count_open() + q.count_closed() == len(q)
    assert q.count_closed() == 1


def test_clear():
    q = PriorityQueueInternal()
    q.enqueue(make("a"))
    q.clear()
    assert len(q) == 0
    assert q.is_empty()
    assert list(q) == []


def test_dump_contents():
    q = PriorityQueueInternal()
    item = make("a", 7, is_open=True)
    q.enqueue(item)
    lines = q.dump_contents()
    assert lines == [
        f"Item 0: Name=a | Tag=Ability.Act | IsOpen=true | Priority=7 | TaskID={item.task_id}"
    ]


def test_items_are_shared_not_copied():
    q = PriorityQueueInternal()
    item = make("a")
    q.enqueue(item)
    item.is_open = True
    assert q.count_open() == len(q)