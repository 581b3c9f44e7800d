from vaultdiff.flatten import FlattenOptions, flatten_map, flatten_secrets


def test_flatten_secrets_disabled_returns_input():
    data = {"secret/app": {"db.host": "localhost", "db.port": "5432"}}
    result = flatten_secrets(data, FlattenOptions(enabled=False))
    assert result["secret/app"]["db.host"] == "localhost"
    assert result is data


def test_flatten_secrets_passthrough_string_values():
    data = {"secret/app": {"host": "localhost", "port": "5432"}}
    result = flatten_secrets(data, FlattenOptions(enabled=True))
    assert result["secret/app"]["host"] == "localhost"
    assert result["secret/app"]["port"] == "5432"


def test_flatten_secrets_does_not_mutate_input():
    original = {"secret/app": {"region": "value"}}
    result = flatten_secrets(original, FlattenOptions(enabled=True))
    result["secret/app"]["region"] = "changed"
    assert original["secret/app"]["region"] == "value"


def test_flatten_secrets_multiple_paths_preserved():
    data = {"secret/a": {"x": "1"}, "secret/b": {"y": "2"}}
    result = flatten_secrets(data, FlattenOptions(enabled=True))
    assert len(result) == 2
    assert result["secret/a"]["x"] == "1"
    assert result["secret/b"]["y"] == "2"


def test_default_flatten_options():
    opts = FlattenOptions()
    assert opts.enabled is False
    assert opts.separator == "."
    assert opts.max_depth == 10


def test_flatten_map_single_level():
    out = flatten_map({"host": "localhost", "port": "5432"}, "", ".", 0, 10)
    assert out == {"host": "localhost", "port": "5432"}


def test_flatten_map_nested():
    out = flatten_map({"db": {"host": "localhost", "port": "5432"}}, "", ".", 0, 10)
    assert out == {"db.host": "localhost", "db.port": "5432"}


def test_flatten_map_custom_separator_and_prefix():
    out = flatten_map({"db": {"host": "h"}}, "root", "/", 0, 10)
    assert out == {"root/db/host": "h"}


def test_flatten_map_trims_leaf_values():
    out = flatten_map({"name": "  padded  "})
    assert out == {"name": "padded"}


def test_flatten_map_beyond_max_depth_renders_map():
    out = flatten_map({"a": {"b": "c"}}, "", ".", 0, 0)
    assert out == {"a": "map[b:c]"}