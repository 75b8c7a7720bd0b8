import io
import logging

from eth_utils import (
    decode_hex,
)
import pytest

import bestchain.cli
from bestchain._utils.hashing import (
    hash256,
)
from bestchain.cli import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    main,
)
from bestchain.exceptions import (
    CyclicAncestry,
)
from bestchain.io import (
    read_height_records,
)
from bestchain.tools.builder import (
    mk_header_record,
)


@pytest.fixture
def forked_records():
    record_a = mk_header_record(work=10, nonce=1)
    hash_a = hash256(record_a)
    record_b = mk_header_record(hash_a, work=5, nonce=2)
    record_c = mk_header_record(hash_a, work=20, nonce=3)
    return record_a, record_b, record_c


def _run(argv, stdin_bytes):
    stdout = io.BytesIO()
    exit_code = main(argv, stdin=io.BytesIO(stdin_bytes), stdout=stdout)
    return exit_code, stdout.getvalue()


def test_cli_selects_heaviest_chain(forked_records, caplog):
    caplog.set_level(logging.INFO)
    record_a, record_b, record_c = forked_records

    exit_code, output = _run([], b"".join((record_c, record_b, record_a)))

    assert exit_code == EXIT_SUCCESS
    hash_a, hash_c = hash256(record_a), hash256(record_c)
    assert read_height_records(io.BytesIO(output)) == tuple(
        sorted(((hash_a, 0), (hash_c, 1)))
    )

    assert "Read 3 headers" in caplog.text
    assert "Found 2 chain tips" in caplog.text
    assert "- Height: 1" in caplog.text
    assert f"- Genesis: {hash_a[::-1].hex()}" in caplog.text
    assert f"- Tip: {hash_c[::-1].hex()}" in caplog.text
    assert "- Work: 30" in caplog.text


def test_cli_deduplicates_headers(forked_records, caplog):
    caplog.set_level(logging.INFO)
    record_a, record_b, record_c = forked_records

    exit_code, output = _run([], record_a + record_b + record_a + record_c + record_c)

    assert exit_code == EXIT_SUCCESS
    assert len(output) == 72
    assert "Read 5 headers" in caplog.text
    assert "Stored 3 unique headers" in caplog.text


def test_cli_diagnostics_stay_off_stdout(forked_records, capsys):
    exit_code, output = _run(["--log-level", "DEBUG"], b"".join(forked_records))

    assert exit_code == EXIT_SUCCESS
    assert len(output) == 72
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Found 2 chain tips" in captured.err


def test_cli_empty_input(caplog):
    exit_code, output = _run([], b"")

    assert exit_code == EXIT_FAILURE
    assert output == b""
    assert "No chain" in caplog.text


def test_cli_truncated_input(forked_records, caplog):
    exit_code, output = _run([], b"".join(forked_records) + b"\x00" * 12)

    assert exit_code == EXIT_FAILURE
    assert output == b""
    assert "12 trailing bytes" in caplog.text


def test_cli_cyclic_input(forked_records, monkeypatch, caplog):
    # content-addressed records cannot form a cycle, so fake the walk failing
    def find_cyclic_chain(store):
        raise CyclicAncestry(b"\x0a" * 32, len(store))

    monkeypatch.setattr(bestchain.cli, "find_best_chain", find_cyclic_chain)

    exit_code, output = _run([], b"".join(forked_records))

    assert exit_code == EXIT_FAILURE
    assert output == b""
    assert "cycle" in caplog.text


def test_cli_genesis_header(caplog):
    caplog.set_level(logging.INFO)
    genesis = decode_hex(
        "0x0100000000000000000000000000000000000000000000000000000000000000"
        "000000003ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa"
        "4b1e5e4a29ab5f49ffff001d1dac2b7c"
    )

    exit_code, output = _run([], genesis)

    assert exit_code == EXIT_SUCCESS
    assert output == hash256(genesis) + b"\x00\x00\x00\x00"
    assert (
        "- Tip: 000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
        in caplog.text
    )


def test_cli_file_arguments(forked_records, tmp_path):
    input_path = tmp_path / "headers.bin"
    output_path = tmp_path / "chain.bin"
    input_path.write_bytes(b"".join(forked_records))

    exit_code = main(["--input", str(input_path), "--output", str(output_path)])

    assert exit_code == EXIT_SUCCESS
    records = read_height_records(io.BytesIO(output_path.read_bytes()))
    assert {height for _, height in records} == {0, 1}


def test_cli_failed_run_keeps_previous_output(tmp_path):
    input_path = tmp_path / "headers.bin"
    output_path = tmp_path / "chain.bin"
    input_path.write_bytes(b"")
    output_path.write_bytes(b"previous chain")

    exit_code = main(["--input", str(input_path), "--output", str(output_path)])

    assert exit_code == EXIT_FAILURE
    assert output_path.read_bytes() == b"previous chain"


def test_cli_failed_run_does_not_create_output(tmp_path):
    input_path = tmp_path / "headers.bin"
    output_path = tmp_path / "chain.bin"
    input_path.write_bytes(b"")

    exit_code = main(["--input", str(input_path), "--output", str(output_path)])

    assert exit_code == EXIT_FAILURE
    assert not output_path.exists()
