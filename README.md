# iqtqueue

A small queue of task items for AI and gameplay code. Each queue picks its
ordering with a `QueueMode`:

- `QueueMode.PRIORITY_ORDER`: items come out in ascending `priority`; a new
  item goes in front of items that already have the same priority
- `QueueMode.FIFO`: first in, first out
- `QueueMode.FILO`: first in, last out

In FIFO and FILO modes the queue overwrites the priority of the item you pass
to `enqueue` with a running counter (counting up from 0 for FIFO, down from
2**31 - 1 for FILO). `reset()` and `clear()` restart these counters.

## Items and tags

`iqtqueue.datatypes` holds the value types:

- `GameplayTag(name)`: a dotted tag such as `"Ability.Attack.Melee"`. An empty
  name is the unset tag; `is_valid()` tells the two apart.
  `matches_tag_exact(other)` needs both names to be equal;
  `matches_tag(other)` also accepts a tag nested beneath `other`.
- `QueueItem`: a dataclass with `name`, `ability_trigger_tag`,
  `ability_end_tag`, `ability_fail_tag`, `is_open`, `priority`, `task_id`
  (a fresh `uuid.UUID` by default), `is_enqueued`, `is_stacked` and
  `user_payload`. Two items are equal when their name, trigger tag (matched
  exactly) and `is_open` agree; `<` and `>` compare priorities. `key()`
  returns that identity as a `(name, tag name, is_open)` tuple.

An item is accepted only when it has a name and a valid trigger tag;
`ItemQueue.validate(item)` checks this in advance.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from iqtqueue.datatypes import GameplayTag, QueueItem, QueueMode
from iqtqueue.queue import ItemQueue, DuplicateItemError, QueueFullError

queue = ItemQueue(mode=QueueMode.FIFO, ignore_duplicates=True, max_size=10)

attack = QueueItem(name="Attack", ability_trigger_tag=GameplayTag("Ability.Attack"))
patrol = QueueItem(name="Patrol", ability_trigger_tag=GameplayTag("Ability.Patrol"))

queue.enqueue(attack)
queue.enqueue(patrol)

print(len(queue))          # 2
print(attack in queue)     # True

try:
    queue.enqueue(QueueItem(name="Attack", ability_trigger_tag=GameplayTag("Ability.Attack")))
except DuplicateItemError:
    print("already queued")

first = queue.dequeue()    # attack comes out first in FIFO mode
print(first.name)          # Attack
```

The queue stores a copy of each item with `is_enqueued` set; `dequeue()`
returns a copy with `is_enqueued` cleared.

### Looking items up

```python
found = queue.find_by_task_id(patrol.task_id)
same = queue.find_by_hash_key("Patrol", GameplayTag("Ability.Patrol"), False)
```

Both return a copy of the queued item, or `None` when nothing matches.

### Counting, removing and clearing

```python
queue.num_open()     # items with is_open set
queue.num_closed()   # items without it
queue.is_empty()
queue.remove(item)   # removes the queued item equal to item
queue.clear()        # drop everything and restart the FIFO/FILO counters
```

## Errors

- `QueueFullError` (from `iqtqueue.queue`): `max_size` is reached. A
  `max_size` of 0 means no limit of its own; a negative one raises
  `ValueError` at construction.
- `DuplicateItemError`: an equal item is queued and `ignore_duplicates` is on.
- `InvalidItemError` (from `iqtqueue.internal`): the item has no name or no
  valid trigger tag.
- `CapacityError` (from `iqtqueue.internal`, the base of `QueueFullError`):
  the underlying queue holds at most 300 items by default.
- `IndexError` from `dequeue()` on an empty queue, `ValueError` from
  `remove()` when no equal item is queued.

## The underlying queue

`iqtqueue.internal.PriorityQueueInternal` is the ordered store behind
`ItemQueue`. Every operation runs under a lock, so a single instance can be
shared between threads. Besides the operations above it supports `len()`,
iteration over a snapshot in queue order, a settable `max_size` (values of 0
or less are ignored) and `dump_contents()`, which returns one descriptive line
per item and logs them.

## What it does not do

Tags are plain data here: the package does not send gameplay events or wait
for an item's end or fail tag to be raised. Nothing is persisted; a queue lives
only in memory.