"""Partial loaders for the mustache_js environment.

Loaders provide partial source to the compiler. They implement
`get_source(name)` returning `(source, filename)` and raise
`TemplateNotFoundError` for unknown names. The compiler calls a loader
once per distinct partial name per compile and lets its error propagate
unchanged.

Built-in Loaders:
- `FileSystemLoader`: Load `<name>.mustache` files from directories
- `DictLoader`: Load from an in-memory dictionary (testing/embedded)
- `ChoiceLoader`: Try multiple loaders in order
- `FunctionLoader`: Wrap a callable as a loader

Custom Loaders:
Implement the Loader protocol:
    ```python
    class DatabaseLoader:
        def get_source(self, name: str) -> tuple[str, str | None]:
            row = db.query("SELECT source FROM partials WHERE name = ?", name)
            if not row:
                raise TemplateNotFoundError(f"Template '{name}' not found")
            return row.source, f"db://{name}"
    ```

"""

from __future__ import annotations

from collections.abc import Callable
from difflib import get_close_matches
from pathlib import Path
from typing import Protocol

from mustache_js.environment.exceptions import TemplateNotFoundError


class Loader(Protocol):
    """Anything that can turn a partial name into source text."""

    def get_source(self, name: str) -> tuple[str, str | None]: ...


class FileSystemLoader:
    """Load partials from filesystem directories.

    A partial named ``user`` is looked up as ``user.mustache`` in each
    search path in order; the first existing file wins.

    Example:
            >>> loader = FileSystemLoader("templates/")
            >>> source, filename = loader.get_source("user")
            >>> print(filename)
            'templates/user.mustache'

    Raises:
        TemplateNotFoundError: If the partial is not found in any search path

    """

    __slots__ = ("_encoding", "_extension", "_paths")

    def __init__(
        self,
        paths: str | Path | list[str | Path],
        extension: str = ".mustache",
        encoding: str = "utf-8",
    ):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._extension = extension
        self._encoding = encoding

    def get_source(self, name: str) -> tuple[str, str]:
        """Load partial source from the filesystem."""
        for base in self._paths:
            path = base / f"{name}{self._extension}"
            if path.is_file():
                return path.read_text(self._encoding), str(path)

        raise TemplateNotFoundError(
            f"Template '{name}' not found in: {', '.join(str(p) for p in self._paths)}"
        )


def _not_found(name: str, known: list[str]) -> TemplateNotFoundError:
    """Build the error for an unknown ``name``, hinting at ``known`` names."""
    message = f"Template '{name}' not found"
    close = get_close_matches(name, known, n=1, cutoff=0.6)
    if close:
        return TemplateNotFoundError(f"{message}. Did you mean '{close[0]}'?")
    if known:
        shown = ", ".join(known[:10])
        extra = f" ... ({len(known)} total)" if len(known) > 10 else ""
        return TemplateNotFoundError(f"{message}. Available: {shown}{extra}")
    return TemplateNotFoundError(message)


class DictLoader:
    """Load partials from an in-memory dictionary.

    Example:
            >>> loader = DictLoader({"user": "<b>{{name}}</b>"})
            >>> env = Environment(loader=loader)
            >>> js = env.to_javascript("{{#users}}{{> user}}{{/users}}")

    Raises:
        TemplateNotFoundError: If the name is not in the mapping, with the
            closest known name when there is one

    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = mapping

    def get_source(self, name: str) -> tuple[str, None]:
        try:
            return self._mapping[name], None
        except KeyError:
            raise _not_found(name, sorted(self._mapping)) from None


class ChoiceLoader:
    """Try multiple loaders in order, returning the first match.

    Only TemplateNotFoundError moves on to the next loader; any other
    loader failure propagates. When every loader misses, the last miss is
    chained as the cause.

    Example:
            >>> loader = ChoiceLoader([
            ...     DictLoader({"header": "<h1>Custom</h1>"}),
            ...     FileSystemLoader("partials/"),
            ... ])

    """

    __slots__ = ("_loaders",)

    def __init__(self, loaders: list[Loader]):
        self._loaders = loaders

    def get_source(self, name: str) -> tuple[str, str | None]:
        last_miss: TemplateNotFoundError | None = None
        for loader in self._loaders:
            try:
                return loader.get_source(name)
            except TemplateNotFoundError as miss:
                last_miss = miss
        raise TemplateNotFoundError(
            f"Template '{name}' not found in any of {len(self._loaders)} loaders"
        ) from last_miss


class FunctionLoader:
    """Wrap a callable as a partial loader.

    The function takes a partial name and returns either the source string,
    a ``(source, filename)`` tuple, or ``None`` when the partial is unknown.

    Example:
            >>> def load(name):
            ...     if name == "greeting":
            ...         return "Hello, {{name}}!"
            ...     return None
            >>> env = Environment(loader=FunctionLoader(load))

    Raises:
        TemplateNotFoundError: If ``load_func`` returns ``None``

    """

    __slots__ = ("_load_func",)

    def __init__(
        self,
        load_func: Callable[[str], str | tuple[str, str | None] | None],
    ):
        self._load_func = load_func

    def get_source(self, name: str) -> tuple[str, str | None]:
        """Call the load function and normalize the result."""
        result = self._load_func(name)

        if result is None:
            raise TemplateNotFoundError(f"Template '{name}' not found")

        if isinstance(result, str):
            return result, "<function>"

        return result
