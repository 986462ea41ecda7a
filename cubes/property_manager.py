"""String properties with regular-expression validation and line editors bound to them.

A property is any hashable object. The manager keeps a value, the value
at the last finished edit, and a validation pattern per property. The factory
keeps line editors in step with the manager in both directions.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable

Pattern = "re.Pattern[str] | None"

_DEFAULT_PATTERN = re.compile(fnmatch.translate("*"))


class Signal:
    """A list of callbacks that are called in order of connection."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


def _compile(pattern: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    """Compile a pattern; an invalid pattern or None means no validation."""
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error:
        return None


def _matches(pattern: re.Pattern[str] | None, text: str) -> bool:
    return pattern is None or pattern.fullmatch(text) is not None


@dataclass
class _Data:
    value: str = ""
    old_value: str = ""
    reg_exp: re.Pattern[str] | None = _DEFAULT_PATTERN


class StringPropertyManager:
    """Holds string values of properties and reports changes through signals.

    Signals: ``property_changed(prop)``, ``value_changed(prop, value)``,
    ``finished(prop, value, old_value)`` and ``reg_exp_changed(prop, pattern)``.
    Calls on properties that are not managed are ignored.
    """

    def __init__(self) -> None:
        self._values: dict[Hashable, _Data] = {}
        self.property_changed = Signal()
        self.value_changed = Signal()
        self.finished = Signal()
        self.reg_exp_changed = Signal()

    def __contains__(self, prop: Hashable) -> bool:
        return prop in self._values

    def initialize_property(self, prop: Hashable) -> None:
        """Start managing ``prop`` with an empty value that accepts any text."""
        self._values[prop] = _Data()

    def uninitialize_property(self, prop: Hashable) -> None:
        """Stop managing ``prop``."""
        self._values.pop(prop, None)

    def value(self, prop: Hashable) -> str:
        """Return the value, or an empty string for an unmanaged property."""
        data = self._values.get(prop)
        return "" if data is None else data.value

    def value_text(self, prop: Hashable) -> str:
        """Return the text shown for the property."""
        return self.value(prop)

    def reg_exp(self, prop: Hashable) -> re.Pattern[str] | None:
        """Return the validation pattern; None means no validation or unmanaged."""
        data = self._values.get(prop)
        return None if data is None else data.reg_exp

    def set_value(self, prop: Hashable, value: str) -> bool:
        """Set the value if it differs and matches the pattern; return whether it changed."""
        data = self._values.get(prop)
        if data is None or data.value == value:
            return False
        if not _matches(data.reg_exp, value):
            return False
        data.value = value
        self.property_changed.emit(prop)
        self.value_changed.emit(prop, value)
        return True

    def set_old_value(self, prop: Hashable, value: str) -> None:
        """Set the value that the next finished edit is compared with."""
        data = self._values.get(prop)
        if data is not None:
            data.old_value = value

    def editing_finished(self, prop: Hashable) -> bool:
        """Report a finished edit if the value differs from the old one; return whether it did."""
        data = self._values.get(prop)
        if data is None or data.value == data.old_value:
            return False
        old_value = data.old_value
        data.old_value = data.value
        self.finished.emit(prop, data.value, old_value)
        return True

    def set_reg_exp(self, prop: Hashable, pattern: str | re.Pattern[str] | None) -> None:
        """Set the validation pattern; an invalid pattern or None disables validation."""
        data = self._values.get(prop)
        if data is None:
            return
        compiled = _compile(pattern)
        current = data.reg_exp
        if (current is None and compiled is None) or (
            current is not None
            and compiled is not None
            and current.pattern == compiled.pattern
            and current.flags == compiled.flags
        ):
            return
        data.reg_exp = compiled
        self.reg_exp_changed.emit(prop, compiled)


@dataclass(eq=False)
class LineEditor:
    """A single-line text editor bound to one property."""

    prop: Hashable
    text: str = ""
    modified: bool = False
    validator: re.Pattern[str] | None = field(default=None)

    def accepts(self, text: str) -> bool:
        """Return whether the validator lets ``text`` through."""
        return _matches(self.validator, text)


class LineEditFactory:
    """Creates line editors for a manager's properties and keeps them in sync."""

    def __init__(self, manager: StringPropertyManager) -> None:
        self.manager = manager
        self._editors: dict[Hashable, list[LineEditor]] = {}
        manager.value_changed.connect(self._property_changed)
        manager.reg_exp_changed.connect(self._reg_exp_changed)

    def editors(self, prop: Hashable) -> list[LineEditor]:
        """Return the live editors of ``prop``."""
        return list(self._editors.get(prop, ()))

    def _known(self, editor: LineEditor) -> bool:
        return any(e is editor for e in self._editors.get(editor.prop, ()))

    def _property_changed(self, prop: Hashable, value: str) -> None:
        for editor in self._editors.get(prop, ()):
            if editor.text != value:
                editor.text = value

    def _reg_exp_changed(self, prop: Hashable, pattern: re.Pattern[str] | None) -> None:
        if prop not in self._editors or prop not in self.manager:
            return
        for editor in self._editors[prop]:
            editor.validator = pattern

    def create_editor(self, prop: Hashable) -> LineEditor:
        """Create an editor showing the property's value and validating with its pattern."""
        editor = LineEditor(
            prop=prop,
            text=self.manager.value(prop),
            validator=self.manager.reg_exp(prop),
        )
        self._editors.setdefault(prop, []).append(editor)
        return editor

    def editor_destroyed(self, editor: LineEditor) -> None:
        """Forget an editor; it no longer follows the property."""
        editors = self._editors.get(editor.prop)
        if editors is None:
            return
        editors[:] = [e for e in editors if e is not editor]
        if not editors:
            del self._editors[editor.prop]

    def text_edited(self, editor: LineEditor, text: str) -> bool:
        """Apply text typed into an editor; return False if the editor rejects it."""
        if not self._known(editor) or not editor.accepts(text):
            return False
        editor.text = text
        editor.modified = True
        self.manager.set_value(editor.prop, text)
        return True

    def editor_finished(self, editor: LineEditor) -> bool:
        """Finish editing; the manager is told only if the editor was modified."""
        if not self._known(editor) or not editor.modified:
            return False
        editor.modified = False
        return self.manager.editing_finished(editor.prop)