"""Deep merge of hierarchical oxlint configuration trees.

Merge policy:
- object + object -> recursive merge key by key
- array           -> replaced wholesale by the override
- scalar / null   -> replaced by the override
- absent (None)   -> treated as an empty object

Neither input is mutated; values are deep-copied into the result.
"""

from copy import deepcopy
from typing import Any

ConfigValue = None | bool | int | float | str | list[Any] | dict[str, Any]


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


def merge_configs(base: ConfigValue, override: ConfigValue) -> ConfigValue:
    """Merge two configuration trees, with override taking precedence.

    Args:
        base: Lower priority configuration (e.g. inline rule options)
        override: Higher priority configuration (e.g. .oxlintrc.json)

    Returns:
        A freshly owned merged tree. When one side is None the result is a
        copy of the other side; when both are None the result is {}.

    Example:
        >>> merge_configs({"rules": {"a": "error"}}, {"rules": {"b": "warn"}})
        {'rules': {'a': 'error', 'b': 'warn'}}
    """
    if base is None:
        return deepcopy(override) if override is not None else {}
    if override is None:
        return deepcopy(base)
    if not (_is_object(base) and _is_object(override)):
        return deepcopy(override)

    result: dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        if key in base and _is_object(base[key]) and _is_object(value):
            result[key] = merge_configs(base[key], value)
        else:
            result[key] = deepcopy(value)
    return result
