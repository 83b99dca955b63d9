r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import itertools
import numpy as np
from faker import Faker
from seqkit import Sequence, from_iterable
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_gen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_gen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _gen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_gen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields see the ones generated before them
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            actual_item_schema = item_schema.get('_gen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count = 5 # default count
        if isinstance(item_schema, dict) and "_gen_count" in item_schema:
            count_config = item_schema["_gen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sequence:
        """`count` records, generated once and stored, so the sequence can be traversed repeatedly"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def stream(self) -> Sequence:
        """an endless sequence of fresh records. only safe behind limit() or a short-circuiting query."""
        return Sequence(lambda: (self._generator.create(self._schema) for _ in itertools.count()))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def int_lists(max_length: int = 8, seed: Optional[int] = None) -> _SchemaProvider:
    """records that are lists of 0..max_length small integers"""
    return from_schema([{
        '_gen_items': ('pyint', {'min_value': -9, 'max_value': 9}),
        '_gen_count': (0, max_length)
    }], seed=seed)
