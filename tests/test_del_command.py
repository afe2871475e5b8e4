import base64
import io
import json

import httpx
import respx

from domain.entities import DeleteResult, KeyValue
from presentation.cli import DelCommand, DeleteReporter, ExitCode

from conftest import FakeStore


def _run(argv, store):
    out, err = io.StringIO(), io.StringIO()
    code = DelCommand(store_factory=lambda: store, stdout=out, stderr=err).run(argv)
    return code, out.getvalue(), err.getvalue()


def test_delete_single_key(store):
    code, out, err = _run(["foo"], store)
    assert code == ExitCode.SUCCESS
    assert out == "1\n"
    assert err == ""


def test_prefix_with_prev_kv_prints_pairs(store):
    code, out, _ = _run(["--prefix", "--prev-kv", "foo"], store)
    assert code == 0
    assert out.splitlines() == ["2", "foo", "f", "foo/bar", "fb"]


def test_flags_after_positionals(store):
    code, out, _ = _run(["foo", "--prefix"], store)
    assert code == 0
    assert out == "2\n"


def test_missing_key_is_bad_args(store):
    code, out, err = _run([], store)
    assert code == ExitCode.BAD_ARGS
    assert out == ""
    assert "one argument as key" in err
    assert store.calls == []


def test_prefix_and_from_key_is_bad_args(store):
    code, _, err = _run(["--prefix", "--from-key", "a"], store)
    assert code == 128
    assert err.startswith("Error: `--prefix` and `--from-key`")


def test_range_end_with_from_key_is_bad_args(store):
    code, _, err = _run(["--from-key", "a", "b"], store)
    assert code == 128
    assert "too many arguments" in err


def test_unknown_flag_is_bad_args(store):
    code, _, err = _run(["--recursive", "a"], store)
    assert code == 128
    assert "unrecognized arguments" in err


def test_store_failure_is_generic_error():
    store = FakeStore({b"foo": b""}, fail_on_delete=1)
    code, out, err = _run(["foo"], store)
    assert code == ExitCode.ERROR
    assert out == ""
    assert err == "Error: etcdserver: permission denied\n"


def test_command_timeout_is_generic_error():
    store = FakeStore({b"foo": b""}, delay=1.0)
    code, _, err = _run(["--command-timeout", "0.01", "foo"], store)
    assert code == 1
    assert "context deadline exceeded" in err


def test_key_contains_dry_run(store):
    code, out, _ = _run(["--key-contains", "abc"], store)
    assert code == 0
    assert out.splitlines() == [
        "Found Key abc-1. Binary is: 61 62 63 2d 31",
        "Found Key x-abc. Binary is: 78 2d 61 62 63",
    ]
    assert store.delete_calls == []


def test_key_contains_execute(store):
    code, out, _ = _run(["--key-contains", "abc", "--execute"], store)
    assert code == 0
    assert out.splitlines() == [
        "Found Key abc-1. Binary is: 61 62 63 2d 31",
        "deleting key...",
        "1",
        "Found Key x-abc. Binary is: 78 2d 61 62 63",
        "deleting key...",
        "1",
    ]


def test_json_output(store):
    code, out, _ = _run(["-w", "json", "--prev-kv", "alpha"], store)
    assert code == 0
    payload = json.loads(out)
    assert payload["deleted"] == 1
    assert payload["prev_kvs"][0]["key"] == base64.b64encode(b"alpha").decode()
    assert payload["header"]["revision"] == 0


def test_invalid_write_out_is_bad_args(store):
    code, _, err = _run(["-w", "yaml", "foo"], store)
    assert code == 128
    assert "invalid choice" in err


def test_reporter_replaces_undecodable_bytes():
    out = io.StringIO()
    DeleteReporter(stream=out).match_found(KeyValue(b"k\xff"))
    assert out.getvalue() == "Found Key k�. Binary is: 6b ff\n"


def test_reporter_simple_without_prev_kvs():
    out = io.StringIO()
    DeleteReporter(stream=out).deleted(DeleteResult(deleted=0))
    assert out.getvalue() == "0\n"


def test_end_to_end_against_gateway():
    endpoint = "http://etcd.test:2379"
    with respx.mock(base_url=endpoint) as mock:
        route = mock.post("/v3/kv/deleterange").mock(
            return_value=httpx.Response(200, json={"header": {"revision": "5"}, "deleted": "3"})
        )
        out, err = io.StringIO(), io.StringIO()
        code = DelCommand(stdout=out, stderr=err).run(["--endpoint", endpoint, "--from-key", ""])

    assert code == 0
    assert out.getvalue() == "3\n"
    assert json.loads(route.calls.last.request.content) == {"key": "AA==", "range_end": "AA=="}


def test_non_positive_command_timeout_is_bad_args(store):
    for value in ("0", "-1", "nan"):
        code, out, err = _run(["--command-timeout", value, "foo"], store)
        assert code == ExitCode.BAD_ARGS
        assert out == ""
        assert "--command-timeout" in err
    assert store.calls == []


def test_non_numeric_command_timeout_is_bad_args(store):
    code, _, err = _run(["--command-timeout", "soon", "foo"], store)
    assert code == 128
    assert "invalid number of seconds" in err
    assert store.calls == []
