# vaultdiff

`vaultdiff` is a small library for working with secrets held as a mapping of
path to key/value pairs, for example:

```python
secrets = {
    "secret/app": {"db_pass": "password", "host": "localhost"},
    "secret/api": {"api_key": "placeholder"},
}
```

It provides the building blocks around comparing two such sets: reshaping
them before a comparison, hiding values before they are shown, checking them
against simple rules, watching paths for changes and saving point-in-time
snapshots.

No function modifies the mapping it is given. Functions that return a copy
when they do their work may return the input object itself when their
options leave them disabled (for example `mask_secrets` with
`MaskOptions(enabled=False)`, the default).

## Installing

```
pip install vaultdiff
```

The package has no runtime dependencies. For the tests:

```
pip install "vaultdiff[test]"
pytest
```

## What is in it

Each function takes an options dataclass; passing `None` uses its defaults.

Reshaping before a comparison:

- `vaultdiff.normalize` – `normalize_secrets(secrets, NormalizeOptions)`:
  trim a key prefix, strip trailing slashes from paths, collapse whitespace
  in values; `collapse_whitespace(text)` on its own.
- `vaultdiff.transform` – `transform_secrets(secrets, TransformOptions)`:
  trim values, lower-case keys, and empty the values of ignored keys
  (matched before or after lower-casing).
- `vaultdiff.flatten` – `flatten_map(mapping, prefix, sep, depth, max_depth)`
  turns a nested mapping into separator-joined string keys, rendering
  anything deeper than `max_depth` as a single value. `flatten_secrets`
  returns a copy of a secrets mapping when enabled.
- `vaultdiff.label` – `label_secrets(secrets, LabelOptions)`: strip a path
  prefix, add one, or replace exact paths with aliases (an alias wins).
- `vaultdiff.pivot` – `pivot_secrets(secrets, PivotOptions)`: turn
  `path -> key -> value` into `key -> path -> value`, optionally for a single
  key and under a path prefix.
- `vaultdiff.group` – `group_secrets(secrets, GroupOptions)`: split secrets
  into `SecretGroup`s sorted by name, by `GroupBy.MOUNT` (first two
  segments), `GroupBy.PREFIX` (first segment) or `GroupBy.DEPTH`;
  `path_segment(path, count)` gives the first `count` segments.
- `vaultdiff.sorting` – `sort_secrets(secrets, SortOptions)`: order paths
  ascending or descending (`SortOrder`), and the pairs within each path by
  key or value (`SortField`).
- `vaultdiff.sample` – `sample_secrets(secrets, SampleOptions)`: keep at most
  `max_paths` paths, chosen by a seeded shuffle.

Combining and changing:

- `vaultdiff.merge` – `merge_secrets(left, right, MergeOptions)`: the right
  side wins on conflict unless `prefer_left` is set; `skip_empty` drops empty
  values.
- `vaultdiff.promote` – `promote_secrets(src, dst, PromoteOptions)`: copy
  `src` into a copy of `dst` and return it with a `PromoteResult` for each
  key. Promotion is disabled and a dry run by default; existing keys are
  skipped unless `overwrite` is set.
- `vaultdiff.patch` – `patch_secrets(secrets, PatchOptions)`: apply
  `PatchOperation`s (`set`, `delete`, `rename`) and return the patched copy
  with a description of each step; raises `PatchError` for an unknown path or
  operation. With `dry_run` only the descriptions are produced.

Hiding values before display:

- `vaultdiff.mask` – `mask_secrets` replaces values with a mask string except
  for revealed keys; `mask_value(key, value, options)` does the same for one
  value, matching revealed keys case-insensitively.
- `vaultdiff.redact` – `redact_secrets(secrets, RedactOptions)` replaces
  values with `[REDACTED]`: every value under a matching path prefix, and the
  values of listed keys elsewhere; `matches_any_prefix(path, prefixes)`.
- `vaultdiff.truncate` – `truncate_secrets(secrets, TruncateOptions)` and
  `truncate_value(text, max_length, ellipsis)`: cut long values and append an
  ellipsis.

Checking and watching:

- `vaultdiff.validate` – `validate_secrets(secrets, ValidationOptions)` raises
  `ValidationError` listing every violation: empty values, forbidden keys
  (case-insensitive) and values longer than `max_value_length` UTF-8 bytes.
  `violation_count(error)` counts them.
- `vaultdiff.watch` – `Watcher(options, fetch)` calls `fetch(path)` for each
  path; `poll(paths)` does this once, and `watch(paths, stop)` repeats it
  every `interval` seconds until the `threading.Event` `stop` is set. When a
  path's pairs differ from the last ones seen, `on_change(path, before,
  after)` is called. Failed fetches are skipped. `maps_equal(a, b)` compares
  two key/value maps.
- `vaultdiff.watch_event` – `diff_to_events(path, prev, curr)` turns a
  before/after pair into `WatchEvent`s of kind `WatchEventKind.ADDED`,
  `MODIFIED` or `REMOVED`.

Supporting pieces:

- `vaultdiff.namespace` – `parse_vault_path(raw, default_namespace)` returns
  a `ParsedPath`; `ParsedPath.full_kv2_path()` gives the KV v2 data path.
  Raises `ValueError` for empty or single-segment paths.
- `vaultdiff.snapshot` – `new_snapshot`, `save_snapshot`, `load_snapshot`:
  JSON snapshots of a secrets mapping with a UTC capture time;
  `Snapshot.secret_count()` counts the pairs. Raises `SnapshotError` on I/O
  or decode failure.
- `vaultdiff.ratelimit` – `RateLimiter(RateLimitOptions)`, a thread-safe
  token bucket that starts full, with blocking `wait()` and non-blocking
  `try_acquire()`.
- `vaultdiff.retry` – `with_retry(func, RetryOptions)` calls `func` and
  returns its result, retrying with exponential back-off only when the error
  is a `RetryableError` (or was raised from one, see `is_retryable`).
- `vaultdiff.timeout` – `TimeoutOptions` holds list, read and total timeouts
  in seconds; `list_deadline()`, `read_deadline()` and `total_deadline()`
  return a `Deadline` with `remaining()` and `expired()`. A zero timeout
  gives a deadline that never expires; `validate()` rejects negative ones.

## Examples

Parsing a path:

```python
from vaultdiff.namespace import parse_vault_path

parsed = parse_vault_path("ns1/secret/myapp", "")
parsed.namespace         # "ns1"
parsed.full_kv2_path()   # "secret/data/myapp"
```

Merging two sets, with the right-hand side winning on conflict:

```python
from vaultdiff.merge import MergeOptions, merge_secrets

left = {"secret/a": {"key": "from-left"}}
right = {"secret/a": {"key": "from-right"}}
merge_secrets(left, right, MergeOptions())   # {"secret/a": {"key": "from-right"}}
```

Redacting before printing:

```python
from vaultdiff.redact import RedactOptions, redact_secrets

redact_secrets(secrets, RedactOptions(keys=["api_key"]))
# {"secret/app": {...}, "secret/api": {"api_key": "[REDACTED]"}}
```

Saving and loading a snapshot:

```python
from vaultdiff.snapshot import load_snapshot, new_snapshot, save_snapshot

snap = new_snapshot("secret/", "staging", secrets)
save_snapshot(snap, "snap.json")
load_snapshot("snap.json").secret_count()   # 3
```

## What it does not do

`vaultdiff` works only on secrets you already have in memory. It has no
client for a secrets server: it does not list or read paths itself (a
`Watcher` is given a `fetch` function to do that). It does not compute a diff
between two sets or render one, and it has no command-line program.