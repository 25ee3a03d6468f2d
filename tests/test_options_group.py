"""Tests for the OptionsGroup service."""

from unittest.mock import Mock

import pytest

from core.types import LifecycleEvent, UNSET_SENTINEL
from providers.stores.memory_store import InMemoryOptionStore
from services.options_group import OptionsGroup


@pytest.fixture
def seeded_store():
    """Store holding one populated group."""
    return InMemoryOptionStore({
        "my_plugin": {
            "enable_cache": "yes",
            "per_page": "20",
            "offset": "-7",
            "ratio": "0.75",
            "title": "Hello",
        }
    })


class TestConstruction:
    """Loading and registrar wiring."""

    def test_loads_existing_values(self, seeded_store):
        group = OptionsGroup("my_plugin", seeded_store)
        assert group.get_option("title") == "Hello"
        assert len(group) == 5

    def test_name_is_trimmed(self, seeded_store):
        group = OptionsGroup("  my_plugin \n", seeded_store)
        assert group.name == "my_plugin"
        assert "title" in group

    def test_missing_group_is_empty(self, memory_store):
        group = OptionsGroup("nothing_here", memory_store)
        assert group.values == {}

    def test_non_mapping_stored_value_is_empty(self):
        store = InMemoryOptionStore({"broken": ["not", "a", "mapping"]})
        assert OptionsGroup("broken", store).values == {}

    def test_serialized_stored_value_is_decoded(self):
        store = InMemoryOptionStore({"legacy": '{"a": 1}'})
        assert OptionsGroup("legacy", store).values == {"a": 1}

    def test_schedules_registration_on_admin_init(self, memory_store):
        registrar = Mock()
        group = OptionsGroup("my_plugin", memory_store, registrar)

        registrar.add_action.assert_called_once_with(LifecycleEvent.ADMIN_INIT, group.register_setting)
        registrar.register_setting.assert_not_called()

    def test_register_setting_hands_over_sanitizer(self, memory_store):
        registrar = Mock()
        group = OptionsGroup("my_plugin", memory_store, registrar)

        group.register_setting()

        registrar.register_setting.assert_called_once_with("my_plugin", group.merge_and_sanitize)

    def test_register_setting_without_registrar_is_noop(self, memory_store):
        group = OptionsGroup("my_plugin", memory_store)
        group.register_setting()


class TestReadsAndWrites:
    """Raw and typed option access."""

    def test_set_then_get_round_trip(self, memory_store):
        group = OptionsGroup("my_plugin", memory_store)

        assert group.set_option("per_page", 20) is True

        assert group.get_option("per_page") == 20
        assert memory_store.load("my_plugin") == {"per_page": 20}

    def test_set_persists_whole_group(self, seeded_store):
        group = OptionsGroup("my_plugin", seeded_store)
        group.set_option("title", "Bye")

        stored = seeded_store.load("my_plugin")
        assert stored["title"] == "Bye"
        assert stored["per_page"] == "20"

    def test_values_visible_to_new_instance(self, memory_store):
        OptionsGroup("my_plugin", memory_store).set_option("colors", {"primary": "#333"})
        assert OptionsGroup("my_plugin", memory_store).get_option("colors") == {"primary": "#333"}

    def test_rejected_write_reports_false(self):
        store = Mock()
        store.load.return_value = {}
        store.save.return_value = False
        group = OptionsGroup("my_plugin", store)

        assert group.set_option("a", 1) is False
        # The in-memory mapping keeps the value even when the store refuses it
        assert group.get_option("a") == 1

    def test_unset_option(self, seeded_store):
        group = OptionsGroup("my_plugin", seeded_store)
        assert group.unset_option("title") is True
        assert "title" not in group
        assert "title" not in seeded_store.load("my_plugin")

    def test_default_fallbacks(self, memory_store):
        group = OptionsGroup("my_plugin", memory_store)
        assert group.get_option("missing") is False
        assert group.get_option("missing", "fallback") == "fallback"
        assert group.get_bool_option("missing") is False
        assert group.get_int_option("missing") == 0
        assert group.get_absint_option("missing") == 0
        assert group.get_abs_option("missing") == 0
        assert group.get_float_option("missing") == 0.0

    def test_typed_defaults_are_coerced(self, memory_store):
        group = OptionsGroup("my_plugin", memory_store)
        assert group.get_bool_option("missing", "yes") is True
        assert group.get_int_option("missing", "12abc") == 12
        assert group.get_absint_option("missing", -4) == 4

    def test_typed_getters(self, seeded_store):
        group = OptionsGroup("my_plugin", seeded_store)
        assert group.get_bool_option("enable_cache") is True
        assert group.get_bool_option("title") is False
        assert group.get_int_option("per_page") == 20
        assert group.get_absint_option("offset") == 7
        assert group.get_abs_option("offset") == 7
        assert group.get_float_option("ratio") == 0.75

    def test_reload_discards_unsaved_state(self, seeded_store):
        group = OptionsGroup("my_plugin", seeded_store)
        seeded_store.save("my_plugin", {"title": "Changed elsewhere"})

        assert group.reload() == {"title": "Changed elsewhere"}

    def test_values_is_a_copy(self, seeded_store):
        group = OptionsGroup("my_plugin", seeded_store)
        group.values["title"] = "mutated"
        assert group.get_option("title") == "Hello"

    def test_to_dict(self, seeded_store):
        snapshot = OptionsGroup("my_plugin", seeded_store).to_dict()
        assert snapshot["name"] == "my_plugin"
        assert snapshot["values"]["title"] == "Hello"


class TestMergeAndSanitize:
    """The pre-save callback."""

    def test_merge_and_prune(self):
        store = InMemoryOptionStore({"g": {"a": 0, "c": 2}})
        group = OptionsGroup("g", store)

        result = group.merge_and_sanitize({"a": 1, "b": ""})

        assert result == {"a": 1, "c": 2}

    def test_replaces_in_memory_values(self):
        store = InMemoryOptionStore({"g": {"a": 1, "b": 2}})
        group = OptionsGroup("g", store)

        group.merge_and_sanitize({"b": UNSET_SENTINEL})

        assert group.values == {"a": 1}

    def test_nested_empty_mapping_collapses(self, memory_store):
        group = OptionsGroup("g", memory_store)
        assert group.merge_and_sanitize({"x": {"y": ""}}) == {}

    def test_does_not_write_to_store(self):
        store = InMemoryOptionStore({"g": {"a": 1}})
        group = OptionsGroup("g", store)

        group.merge_and_sanitize({"b": 2})

        assert store.load("g") == {"a": 1}

    def test_accepts_serialized_payload(self, memory_store):
        group = OptionsGroup("g", memory_store)
        assert group.merge_and_sanitize('{"a": "x", "b": ""}') == {"a": "x"}

    def test_is_idempotent(self):
        store = InMemoryOptionStore({"g": {"a": 1, "nested": {"b": "", "c": 3}}})
        group = OptionsGroup("g", store)

        first = group.merge_and_sanitize({})
        assert group.merge_and_sanitize({}) == first == {"a": 1, "nested": {"c": 3}}

    def test_returns_a_copy(self, memory_store):
        group = OptionsGroup("g", memory_store)
        result = group.merge_and_sanitize({"a": 1})
        result["a"] = 2
        assert group.get_option("a") == 1


class TestTypedGettersAreTotal:
    """Typed getters on stored values too large to convert."""

    @pytest.mark.parametrize(
        "value",
        ["9" * 400, "1" * 5000, 10 ** 5000, -(10 ** 400)],
        ids=["wide-text", "over-limit-text", "over-limit-int", "negative-wide-int"],
    )
    def test_never_raise(self, value):
        group = OptionsGroup("g", InMemoryOptionStore({"g": {"k": value}}))

        assert isinstance(group.get_bool_option("k"), bool)
        assert isinstance(group.get_int_option("k"), int)
        assert isinstance(group.get_absint_option("k"), int)
        assert isinstance(group.get_float_option("k"), float)
        assert group.get_abs_option("k") >= 0
