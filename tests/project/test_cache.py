import json

from create_ignite.project.cache import FileConfigStore, MemoryConfigStore, NullConfigStore


def test_file_store_missing_file(tmp_path):
    store = FileConfigStore(str(tmp_path / "nope.json"))
    assert store.load() is None


def test_file_store_save_and_load(tmp_path, project_config):
    path = tmp_path / "sub" / "ignite.json"
    store = FileConfigStore(str(path))
    config = project_config(framework="vue", state_management="pinia")

    assert store.save(config) is True

    record = json.loads(path.read_text())
    assert record["framework"] == "vue"
    assert record["stateManagement"] == "pinia"
    assert store.load() == config


def test_file_store_overwrites(tmp_path, project_config):
    store = FileConfigStore(str(tmp_path / "ignite.json"))
    store.save(project_config(framework="vue"))
    store.save(project_config(framework="nuxt"))

    assert store.load().framework == "nuxt"


def test_file_store_corrupt_file(tmp_path):
    path = tmp_path / "ignite.json"
    path.write_text("{not json")
    assert FileConfigStore(str(path)).load() is None


def test_file_store_invalid_record(tmp_path):
    path = tmp_path / "ignite.json"
    path.write_text(json.dumps({"projectName": "x", "projectType": "frontend", "framework": "angular"}))
    assert FileConfigStore(str(path)).load() is None


def test_file_store_save_failure(tmp_path, project_config):
    # parent "directory" is a regular file
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = FileConfigStore(str(blocker / "ignite.json"))

    assert store.save(project_config()) is True


def test_memory_store(project_config):
    store = MemoryConfigStore()
    assert store.load() is None

    config = project_config()
    assert store.save(config) is True
    assert store.record["projectName"] == "my-app"
    assert store.load() == config

    assert MemoryConfigStore(config).load() == config


def test_null_store(project_config):
    store = NullConfigStore()
    assert store.save(project_config()) is True
    assert store.load() is None
