r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

test data for the pullq suites: schema-driven fake records, plus sources that
record how far they were read.
'''

import numpy as np
from faker import Faker
from pullq import from_iterable, Enumerable, Sequence, as_sequence
from typing import Any, Dict, Iterable, Iterator, List, Optional


class Generator:
    """schema interpreter.

    a schema is a dict of field -> definition, where a definition is
        'word'                                  a faker provider name
        ('pyint', {'min_value': 1})             a provider with arguments
        {'_qen_provider': 'choice', 'from': []} a pick from a fixed list
        {'_qen_provider': 'literal', 'value': x}
        {...}                                   a nested record
    anything else is used as-is.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # pick by index so python values come back unchanged (no numpy scalars)
            options = config["from"]
            return options[int(self._rng.integers(0, len(options)))]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """generate count records up front and wrap them in a re-runnable enumerable"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def stream(self, count: Optional[int] = None) -> Sequence:
        """a single-pass sequence creating records as they are pulled; endless when count is None"""
        def records() -> Iterator[Any]:
            produced = 0
            while count is None or produced < count:
                produced += 1
                yield self._generator.create(self._schema)
        return as_sequence(records())


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


# --- instrumented sources ---

class Tracked:
    """
    an iterable that records every item handed out.
    each iter() starts a new pass over the data; `pulled` keeps the running log.
    """

    def __init__(self, data: Iterable[Any]):
        self._data = list(data)
        self.pulled: List[Any] = []
        self.passes = 0

    def __iter__(self) -> Iterator[Any]:
        self.passes += 1
        for item in self._data:
            self.pulled.append(item)
            yield item

    @property
    def pull_count(self) -> int:
        return len(self.pulled)


def naturals(start: int = 0) -> Iterator[int]:
    """an endless source, for checking that operators stop pulling"""
    value = start
    while True:
        yield value
        value += 1
