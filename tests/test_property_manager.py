import pytest

from cubes.property_manager import LineEditFactory, StringPropertyManager


@pytest.fixture
def manager():
    m = StringPropertyManager()
    m.initialize_property("p")
    return m


def record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_default_value_is_empty_and_any_text_accepted(manager):
    assert manager.value("p") == ""
    assert manager.set_value("p", "any text?") is True
    assert manager.value("p") == "any text?"
    assert manager.value_text("p") == "any text?"


def test_set_value_emits_signals(manager):
    changed = record(manager.value_changed)
    props = record(manager.property_changed)
    manager.set_value("p", "abc")
    assert changed == [("p", "abc")]
    assert props == [("p",)]


def test_same_value_does_not_emit(manager):
    manager.set_value("p", "abc")
    changed = record(manager.value_changed)
    assert manager.set_value("p", "abc") is False
    assert changed == []


def test_unmanaged_property_is_ignored():
    m = StringPropertyManager()
    assert m.set_value("q", "x") is False
    assert m.value("q") == ""
    assert m.reg_exp("q") is None
    assert m.editing_finished("q") is False


def test_reg_exp_rejects_non_matching(manager):
    manager.set_reg_exp("p", r"[0-9]+")
    assert manager.set_value("p", "12a") is False
    assert manager.value("p") == ""
    assert manager.set_value("p", "123") is True
    assert manager.value("p") == "123"


def test_reg_exp_change_emits_once(manager):
    calls = record(manager.reg_exp_changed)
    manager.set_reg_exp("p", r"a+")
    manager.set_reg_exp("p", r"a+")
    assert len(calls) == 1
    assert calls[0][1].pattern == "a+"
    assert manager.reg_exp("p").pattern == "a+"


def test_invalid_pattern_disables_validation(manager):
    manager.set_reg_exp("p", "(")
    assert manager.reg_exp("p") is None
    assert manager.set_value("p", "anything") is True


def test_editing_finished_reports_old_value(manager):
    finished = record(manager.finished)
    manager.set_old_value("p", "start")
    manager.set_value("p", "end")
    assert manager.editing_finished("p") is True
    assert finished == [("p", "end", "start")]
    assert manager.editing_finished("p") is False
    assert len(finished) == 1


def test_uninitialize(manager):
    manager.set_value("p", "x")
    manager.uninitialize_property("p")
    assert "p" not in manager
    assert manager.value("p") == ""


def test_editor_shows_value_and_follows_changes(manager):
    manager.set_value("p", "one")
    factory = LineEditFactory(manager)
    editor = factory.create_editor("p")
    assert editor.text == "one"
    manager.set_value("p", "two")
    assert editor.text == "two"


def test_text_edited_updates_manager_and_other_editors(manager):
    factory = LineEditFactory(manager)
    first = factory.create_editor("p")
    second = factory.create_editor("p")
    assert factory.text_edited(first, "typed") is True
    assert manager.value("p") == "typed"
    assert second.text == "typed"
    assert first.modified is True


def test_editor_finished_only_when_modified(manager):
    factory = LineEditFactory(manager)
    editor = factory.create_editor("p")
    finished = record(manager.finished)
    assert factory.editor_finished(editor) is False
    factory.text_edited(editor, "new")
    assert factory.editor_finished(editor) is True
    assert finished == [("p", "new", "")]
    assert editor.modified is False


def test_validator_follows_reg_exp(manager):
    factory = LineEditFactory(manager)
    editor = factory.create_editor("p")
    manager.set_reg_exp("p", r"[a-z]+")
    assert editor.validator.pattern == "[a-z]+"
    assert factory.text_edited(editor, "ABC") is False
    assert manager.value("p") == ""


def test_destroyed_editor_no_longer_follows(manager):
    factory = LineEditFactory(manager)
    editor = factory.create_editor("p")
    factory.editor_destroyed(editor)
    assert factory.editors("p") == []
    manager.set_value("p", "later")
    assert editor.text == ""
    assert factory.text_edited(editor, "x") is False
    assert manager.value("p") == "later"