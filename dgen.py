r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded fake data for the listops test suites.
'''

import numpy as np
from faker import Faker
from listops import from_iterable, ListEnumerable
from typing import Any, Dict, List, Optional


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
        provider = config["_qen_provider"]
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
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        elif provider == "ints":
            # a flat list of small integers, good for exercising duplicates
            low, high = config.get("range", (0, 10))
            return self._rng.integers(low, high, size=self._get_count(config), endpoint=True).tolist()

        elif provider == "nested":
            return self._nested_list(config.get("depth", 3), config.get("range", (0, 100)))

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def _nested_list(self, depth: int, value_range) -> List[Any]:
        """a randomly shaped list whose elements are ints or further lists, at most depth levels deep"""
        low, high = value_range
        result = []
        for _ in range(int(self._rng.integers(0, 5, endpoint=True))):
            if depth > 1 and self._rng.random() < 0.4:
                result.append(self._nested_list(depth - 1, value_range))
            else:
                result.append(int(self._rng.integers(low, high, endpoint=True)))
        return result

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        # if context is none, it becomes an empty dict.
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # create a new object, building a local context sequentially
            generated_obj = {}
            for k, v in schema.items():
                # refs can look up (into parent) and sideways (into local)
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, config: Dict) -> int:
        count_config = config.get("_qen_count", 5)
        if isinstance(count_config, (list, tuple)) and len(count_config) == 2:
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return int(count_config)


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> ListEnumerable:
        # generate eagerly so repeated reads of the enumerable see the same records
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
