r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven record generator for the underbar test suites.
a schema is a dict of field -> spec, where spec is one of:
  'word'                                  a faker provider name
  ('pyint', {'min_value': 1})             a faker provider with arguments
  {'_provider': 'choice', 'from': [...]}  a pick from a list
  {'_provider': 'ref', 'key': 'id'}       the value of an earlier field
  {'_provider': 'literal', 'value': x}    x itself
  [{'_items': schema, '_count': 3}]       a list of nested records
'''

import numpy as np
from faker import Faker
from underbar import chain, Wrapped
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            # index into the list so the pick keeps its native python type
            options = config["from"]
            return options[int(self._rng.integers(0, len(options)))]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields may refer to fields generated before them
            record = {}
            for key, spec in schema.items():
                record[key] = self.create(spec, {**current_context, **record})
            return record

        if isinstance(schema, list):
            if not schema:
                return []
            item_schema = schema[0]
            count = item_schema.get('_count', 3) if isinstance(item_schema, dict) else 3
            actual_item_schema = item_schema.get('_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

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

    def records(self, count: int) -> List[Dict[str, Any]]:
        """count freshly generated records"""
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Wrapped:
        """count records, wrapped for chaining"""
        return chain(self.records(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
