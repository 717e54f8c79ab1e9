"""Data classes and errors for doc_generation package."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from prefsdoc.config.defaults import (
    DEFAULT_TRUNCATE_LENGTH,
    EMPTY_DEFAULT_MARKER,
    KEY_PREFIX,
    TARGET_NAMESPACE,
    TRUNCATION_SUFFIX,
)


class PreferencesDocError(RuntimeError):
    """Base class for errors that stop a documentation run."""


class MissingSourceError(PreferencesDocError):
    """Raised when one of the markup, entity or defaults sources is missing."""

    def __init__(self, role: str, path: Optional[Any] = None) -> None:
        where = f" ({path})" if path else ""
        super().__init__(f"No {role} source found{where}")
        self.role = role
        self.path = path


class MarkupSyntaxError(PreferencesDocError):
    """Raised when the expanded markup cannot be parsed."""


class DefaultsFormatError(PreferencesDocError):
    """Raised when the defaults file is not a key -> value mapping."""


class MissingLabelError(PreferencesDocError):
    """Raised when a <label> resolves to an empty label for a bound control."""

    def __init__(self, preference: str) -> None:
        super().__init__(f"Missing label for {preference}")
        self.preference = preference


class KeyMismatchError(PreferencesDocError):
    """Raised when a declaration's id does not match its preference name."""

    def __init__(self, name: str, key: str) -> None:
        super().__init__(f"Fix id for {name} (id is {key!r})")
        self.name = name
        self.key = key


class DuplicatePreferenceError(PreferencesDocError):
    """Raised when the same preference key is declared twice."""

    def __init__(self, key: str) -> None:
        super().__init__(f"{key} declared more than once")
        self.key = key


class UnknownPreferenceError(PreferencesDocError):
    """Raised when a control binds to a preference that was never declared."""

    def __init__(self, key: str) -> None:
        super().__init__(f"{key} not found")
        self.key = key


class UnsupportedPreferenceError(PreferencesDocError):
    """Raised when a declared preference has no entry in the defaults."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported pref {name}")
        self.name = name


class UnlabelledPreferenceError(PreferencesDocError):
    """Raised when a preference shown on a panel has no label to render."""

    def __init__(self, record: "PreferenceRecord") -> None:
        super().__init__(f"Unlabelled {record.describe()}")
        self.record = record


class UndocumentedPreferencesError(PreferencesDocError):
    """Aggregate validation failure; `entries` lists every offending preference."""

    exit_code = 1

    def __init__(self, entries: List[str]) -> None:
        super().__init__(f"{len(entries)} undocumented preference(s)")
        self.entries = entries


class ValueType(str, Enum):
    """Type tag of a default value, as written in a <preference type=...>."""

    INT = "int"
    BOOL = "bool"
    STRING = "string"
    UNKNOWN = "??"


@dataclass(frozen=True)
class DefaultValue:
    """A typed default value from the defaults mapping."""

    kind: ValueType
    value: Any

    @classmethod
    def from_yaml(cls, value: Any) -> "DefaultValue":
        # bool is a subclass of int, so it has to be checked first
        if isinstance(value, bool):
            return cls(ValueType.BOOL, value)
        if isinstance(value, int):
            return cls(ValueType.INT, value)
        if isinstance(value, str):
            return cls(ValueType.STRING, value)
        return cls(ValueType.UNKNOWN, value)

    def render(self, max_length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
        """Format the value for the `*default: ...*` line."""
        if self.kind is ValueType.STRING:
            if self.value == "":
                return EMPTY_DEFAULT_MARKER
            if len(self.value) > max_length:
                return self.value[:max_length] + TRUNCATION_SUFFIX
            return self.value
        if self.kind is ValueType.BOOL:
            return "true" if self.value else "false"
        if self.value is None:
            return ""
        return str(self.value)


@dataclass(frozen=True)
class Namespace:
    """Prefixes that identify the preferences this component owns."""

    prefix: str = TARGET_NAMESPACE
    key_prefix: str = KEY_PREFIX

    def owns(self, name: str) -> bool:
        return name.startswith(self.prefix)

    def short_name(self, name: str) -> str:
        return name[len(self.prefix):] if self.owns(name) else name

    def short_key(self, key: str) -> str:
        return key[len(self.key_prefix):] if key.startswith(self.key_prefix) else key

    def qualify(self, name: str) -> str:
        """Add the namespace prefix to a defaults key that lacks it."""
        return name if self.owns(name) else self.prefix + name

    def declaration_id(self, name: str) -> str:
        """The `id` a <preference> declaration for `name` should carry."""
        return (self.key_prefix + self.short_name(name)).replace(".", "-")


@dataclass
class PreferenceRecord:
    """One declared preference and everything the pane says about it."""

    name: str
    key: str
    type: str
    is_target: bool = False
    doc: str = ""  # appended to in document order
    label: Optional[str] = None
    panel: Optional[str] = None  # None means hidden
    default: Optional[DefaultValue] = None

    def append_doc(self, text: str) -> None:
        self.doc += text

    def describe(self) -> str:
        return (
            f"{self.name} (key={self.key!r}, type={self.type!r}, "
            f"label={self.label!r}, panel={self.panel!r})"
        )


@dataclass
class WalkContext:
    """State threaded through a single walk of the preferences pane."""

    panels: List[Optional[str]] = field(default_factory=list)
    panel_index: Optional[int] = None  # unset until the first <tabpanel>
    preface: str = ""
    records: List[PreferenceRecord] = field(default_factory=list)
    _by_key: Dict[str, PreferenceRecord] = field(default_factory=dict, repr=False)

    def add_panel(self, label: Optional[str]) -> None:
        self.panels.append(label)

    def advance_panel(self) -> None:
        self.panel_index = 0 if self.panel_index is None else self.panel_index + 1

    @property
    def current_panel(self) -> Optional[str]:
        """Name of the panel being walked, or None outside any known or named panel."""
        if self.panel_index is None or self.panel_index >= len(self.panels):
            return None
        return self.panels[self.panel_index]

    def declare(self, record: PreferenceRecord) -> PreferenceRecord:
        if record.key in self._by_key:
            raise DuplicatePreferenceError(record.key)
        self._by_key[record.key] = record
        self.records.append(record)
        return record

    def lookup(self, key: str) -> PreferenceRecord:
        try:
            return self._by_key[key]
        except KeyError:
            raise UnknownPreferenceError(key) from None

    @property
    def targets(self) -> List[PreferenceRecord]:
        return [r for r in self.records if r.is_target]


@dataclass
class LoadedSources:
    """Parsed inputs for one run."""

    tree: Any  # lxml ElementTree of the expanded markup
    defaults: Dict[str, DefaultValue]
