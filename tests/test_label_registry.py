from core.label_registry import LabelRegistry, sidecar_path


def test_first_name_wins_and_items_are_sorted():
    registry = LabelRegistry()
    registry.register(12, "bob")
    registry.register(7, "alice")
    registry.register(7, "alice-again")

    assert list(registry.items()) == [(7, "alice"), (12, "bob")]
    assert registry.get(7) == "alice"
    assert registry.get(99) is None
    assert 12 in registry


def test_save_and_load(tmp_path):
    registry = LabelRegistry()
    registry.register(3, "carol")
    path = tmp_path / "labels.json"
    registry.save(path)

    restored = LabelRegistry()
    restored.register(1, "stale")

    assert restored.load(path) == 1
    assert list(restored.items()) == [(3, "carol")]


def test_sidecar_path(tmp_path):
    assert sidecar_path(tmp_path / "model.yml") == tmp_path / "model.yml.labels.json"
