from __future__ import annotations

import logging
from ..types import *
from ..config import report_buffer
from ..sequence import Sequence
from ..producers import from_mapping

logger = logging.getLogger(__name__)


def group_by(source: Iterable[T],
             key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Sequence[KeyValue[K, List[V]]]:
    """
    bucket every item under its key and enumerate the buckets.

    the source is consumed when group_by is called; the returned sequence then
    yields KeyValue(key, values) lazily. keys must be hashable. groups come
    out in the order their keys were first seen, values in source order.
    """
    value_selector = value_selector if value_selector is not None else self_selector
    buckets: Dict[K, List[V]] = {}
    for item in source:
        key = key_selector(item)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = []
        bucket.append(value_selector(item))
    report_buffer(logger, 'group_by', len(buckets), 'groups')
    return from_mapping(buckets)


def group_compared(source: Iterable[T],
                   key_selector: KeySelector[T, K],
                   key_comparer: Optional[KeyComparer[K]] = None,
                   value_selector: Optional[Selector[T, V]] = None) -> List[Group[K, V]]:
    """
    group by keys that need not be hashable, using a custom equality.

    each key is matched against the groups found so far with
    key_comparer(existing_key, key), a linear scan, so the cost is
    o(items * groups). returns a list of Group in first-seen key order.
    """
    key_comparer = key_comparer if key_comparer is not None else default_comparer
    value_selector = value_selector if value_selector is not None else self_selector
    groups: List[Group[K, V]] = []
    for item in source:
        key = key_selector(item)
        group = next((g for g in groups if key_comparer(g.key, key)), None)
        if group is None:
            group = Group(key)
            groups.append(group)
        group.value.append(value_selector(item))
    report_buffer(logger, 'group_compared', len(groups), 'groups')
    return groups
