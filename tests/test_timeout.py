import time

import pytest

from vaultdiff.timeout import Deadline, TimeoutOptions


def test_default_timeout_options():
    opts = TimeoutOptions()
    assert opts.list_timeout == 15
    assert opts.read_timeout == 10
    assert opts.total_timeout == 0


@pytest.mark.parametrize(
    "opts, field",
    [
        (TimeoutOptions(list_timeout=-1), "list-timeout"),
        (TimeoutOptions(read_timeout=-1), "read-timeout"),
        (TimeoutOptions(total_timeout=-1), "total-timeout"),
    ],
)
def test_validate_rejects_negative(opts, field):
    with pytest.raises(ValueError, match=field):
        opts.validate()


@pytest.mark.parametrize(
    "opts",
    [TimeoutOptions(), TimeoutOptions(list_timeout=0, read_timeout=0, total_timeout=0)],
)
def test_validate_accepts_valid(opts):
    opts.validate()
    assert opts.list_timeout >= 0 and opts.read_timeout >= 0 and opts.total_timeout >= 0


def test_list_deadline_applied():
    deadline = TimeoutOptions(list_timeout=5).list_deadline()
    remaining = deadline.remaining()
    assert remaining is not None
    assert 0 < remaining <= 5
    assert deadline.expired() is False


def test_list_deadline_zero_has_no_deadline():
    deadline = TimeoutOptions(list_timeout=0).list_deadline()
    assert deadline.remaining() is None
    assert deadline.expired() is False


def test_total_deadline_applied():
    remaining = TimeoutOptions(total_timeout=30).total_deadline().remaining()
    assert remaining is not None
    assert 0 < remaining <= 30


def test_read_deadline_zero_has_no_deadline():
    deadline = TimeoutOptions(read_timeout=0).read_deadline()
    assert deadline.remaining() is None


def test_read_deadline_applied():
    remaining = TimeoutOptions(read_timeout=10).read_deadline().remaining()
    assert remaining is not None
    assert 0 < remaining <= 10


def test_deadline_expires():
    deadline = TimeoutOptions(read_timeout=0.001).read_deadline()
    time.sleep(0.01)
    assert deadline.expired() is True
    assert deadline.remaining() == 0


def test_unbounded_deadline_never_expires():
    assert Deadline().expired() is False


def test_is_zero():
    assert TimeoutOptions(list_timeout=0, read_timeout=0, total_timeout=0).is_zero() is True
    assert TimeoutOptions().is_zero() is False