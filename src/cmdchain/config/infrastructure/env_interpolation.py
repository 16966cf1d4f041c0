"""${ENV_VAR} and ${ENV_VAR:-default} substitution over parsed YAML data."""

import os
import re
from collections.abc import Iterator

_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of referenced env vars that are unset and have no default.

    Names appear once each, in first-reference order.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _REFERENCE.finditer(text):
            name = match.group("name")
            if (
                name not in os.environ
                and match.group("default") is None
                and name not in missing
            ):
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every reference replaced by its value.

    Callers check `collect_missing_vars` first; an unset variable without a
    default raises KeyError here.
    """
    if isinstance(data, str):
        return _REFERENCE.sub(_resolve, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _resolve(match: re.Match[str]) -> str:
    name = match.group("name")
    default = match.group("default")
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)
