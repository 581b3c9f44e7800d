from vaultdiff.group import GroupBy, GroupOptions, SecretGroup, group_secrets, path_segment


def test_group_secrets_disabled():
    data = {"secret/app/db": {"pass": "password"}, "secret/app/api": {"region": "y"}}
    groups = group_secrets(data, GroupOptions(enabled=False))
    assert len(groups) == 1
    assert groups[0].name == ""
    assert len(groups[0].secrets) == 2


def test_group_secrets_by_mount():
    data = {
        "secret/app/db": {"pass": "password"},
        "secret/app/api": {"region": "y"},
        "kv/infra/redis": {"url": "z"},
    }
    groups = group_secrets(data, GroupOptions(enabled=True, group_by=GroupBy.MOUNT))
    assert [g.name for g in groups] == ["kv/infra", "secret/app"]
    assert set(groups[1].secrets) == {"secret/app/db", "secret/app/api"}


def test_group_secrets_by_prefix():
    data = {"secret/a/x": {"k": "v"}, "secret/b/y": {"k": "v"}, "kv/a/z": {"k": "v"}}
    groups = group_secrets(data, GroupOptions(enabled=True, group_by="prefix"))
    assert [g.name for g in groups] == ["kv", "secret"]


def test_group_secrets_by_depth():
    data = {"a/b/c/d": {"k": "1"}, "a/b/e/f": {"k": "2"}, "a/x/y/z": {"k": "3"}}
    groups = group_secrets(data, GroupOptions(enabled=True, group_by=GroupBy.DEPTH, depth=2))
    assert [g.name for g in groups] == ["a/b", "a/x"]


def test_group_secrets_unknown_mode_falls_back_to_mount():
    data = {"secret/app/db": {"k": "v"}}
    groups = group_secrets(data, GroupOptions(enabled=True, group_by="other"))
    assert [g.name for g in groups] == ["secret/app"]


def test_group_secrets_empty_yields_single_empty_group():
    groups = group_secrets({}, GroupOptions(enabled=True))
    assert groups == [SecretGroup(name="", secrets={})]


def test_default_group_options():
    opts = GroupOptions()
    assert opts.enabled is False
    assert opts.group_by == "mount"
    assert opts.depth == 1


def test_path_segment():
    assert path_segment("a/b/c", 2) == "a/b"
    assert path_segment("a/b/c", 1) == "a"
    assert path_segment("a/b/c", 3) == "a/b/c"
    assert path_segment("a/b/c", 0) == "a/b/c"