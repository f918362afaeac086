"""Split options: defaults, merging of user options and validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

from splitcss.errors import ConfigurationError
from splitcss.naming import validate_template

# Option spellings accepted by :meth:`SplitConfig.from_options`.
_ALIASES: dict[str, str] = {
    "maxSelectors": "max_selectors",
    "fileName": "file_name",
    "fileNameTemplate": "file_name",
    "fileNameStartIndex": "file_name_start_index",
    "writeFiles": "write_files",
    "writeFragmentsToStorage": "write_files",
    "writeSourceMaps": "write_source_maps",
    "writeImport": "write_import",
    "emitImportLinks": "write_import",
}

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


@dataclass(frozen=True)
class SplitConfig:
    max_selectors: int = 4000
    file_name: str = "%original%-%i%"
    file_name_start_index: int = 0
    write_files: bool = True
    write_source_maps: bool = True
    write_import: bool = True
    quiet: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, object] | None = None) -> SplitConfig:
        """Merge *options* over the defaults.

        Keys may use the field names or their camelCase spellings.  Unknown
        keys and values of the wrong type raise :class:`ConfigurationError`.
        """
        types = {f.name: f.type for f in fields(cls)}
        merged: dict[str, object] = {}
        for key, value in (options or {}).items():
            name = _ALIASES.get(key, key)
            if name not in types:
                raise ConfigurationError(f"Unknown option {key!r}", option=key)
            merged[name] = _coerce(name, types[name], value)
        return cls(**merged)  # type: ignore[arg-type]

    def validate(self) -> SplitConfig:
        """Raise :class:`ConfigurationError` for unusable settings; return self."""
        if isinstance(self.max_selectors, bool) or not isinstance(self.max_selectors, int):
            raise ConfigurationError(
                f"max_selectors must be an integer, got {self.max_selectors!r}",
                option="max_selectors",
            )
        if self.max_selectors <= 0:
            raise ConfigurationError(
                f"max_selectors must be positive, got {self.max_selectors}",
                option="max_selectors",
            )
        if isinstance(self.file_name_start_index, bool) or not isinstance(
            self.file_name_start_index, int
        ):
            raise ConfigurationError(
                "file_name_start_index must be an integer, "
                f"got {self.file_name_start_index!r}",
                option="file_name_start_index",
            )
        validate_template(self.file_name)
        return self

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def _coerce(name: str, annotation: object, value: object) -> object:
    """Coerce an option value to the type its field expects."""
    if annotation in ("bool", bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE + _FALSE:
            return value.lower() in _TRUE
        if isinstance(value, int):
            return bool(value)
        raise ConfigurationError(f"Option {name!r} expects a boolean, got {value!r}", option=name)
    if annotation in ("int", int):
        if isinstance(value, bool):
            raise ConfigurationError(f"Option {name!r} expects an integer, got {value!r}", option=name)
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"Option {name!r} expects an integer, got {value!r}", option=name, cause=exc
            ) from exc
    if not isinstance(value, str):
        raise ConfigurationError(f"Option {name!r} expects a string, got {value!r}", option=name)
    return value
