from vaultdiff.promote import PromoteOptions, PromoteResult, promote_secrets


def test_disabled_returns_destination_unchanged():
    src = {"a": {"x": "1"}}
    dst: dict[str, dict[str, str]] = {}
    out, results = promote_secrets(src, dst, PromoteOptions())
    assert results == []
    assert out == {}
    assert out is dst


def test_dry_run_reports_without_applying():
    src = {"secret/app": {"db_pass": "secret"}}
    dst: dict[str, dict[str, str]] = {}
    out, results = promote_secrets(src, dst, PromoteOptions(enabled=True, dry_run=True))
    assert results == [PromoteResult(path="secret/app", key="db_pass")]
    assert "secret/app" not in out


def test_applies_changes():
    src = {"secret/app": {"k": "val"}}
    out, results = promote_secrets(
        src, {}, PromoteOptions(enabled=True, dry_run=False, overwrite=True)
    )
    assert len(results) == 1
    assert out["secret/app"]["k"] == "val"


def test_skips_conflict_without_overwrite():
    src = {"secret/app": {"k": "new"}}
    dst = {"secret/app": {"k": "existing"}}
    out, results = promote_secrets(
        src, dst, PromoteOptions(enabled=True, dry_run=False, overwrite=False)
    )
    assert len(results) == 1
    assert results[0].skipped is True
    assert results[0].reason == "key already exists in destination (overwrite=false)"
    assert out["secret/app"]["k"] == "existing"


def test_overwrite_replaces_existing_value():
    src = {"secret/app": {"k": "new"}}
    dst = {"secret/app": {"k": "existing", "other": "kept"}}
    out, results = promote_secrets(
        src, dst, PromoteOptions(enabled=True, dry_run=False, overwrite=True)
    )
    assert out["secret/app"] == {"k": "new", "other": "kept"}
    assert results[0].skipped is False


def test_with_path_prefix():
    src = {"app": {"token": "token"}}
    out, results = promote_secrets(
        src, {}, PromoteOptions(enabled=True, dry_run=False, path_prefix="prod")
    )
    assert out["prod/app"]["token"] == "token"
    assert results[0].path == "prod/app"


def test_does_not_mutate_input():
    src = {"s": {"k": "v"}}
    dst = {"s": {"other": "x"}}
    promote_secrets(src, dst, PromoteOptions(enabled=True, dry_run=False, overwrite=True))
    assert "k" not in dst["s"]
    assert dst == {"s": {"other": "x"}}