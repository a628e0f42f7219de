import os
import random
import subprocess
import sys
from pathlib import Path

import pytest

from huffcodec.encoding_schemes import (
    ContractViolation,
    EmptyTreeError,
    FormatError,
    analyze,
    huffman_decode,
    huffman_encode,
)
from huffcodec.encoding_schemes.bitstream import decode_bits, encode_bits
from huffcodec.encoding_schemes.tree import build_tree
from huffcodec.reporting.reference import reference_encode

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_known_vector_artifact():
    artifact = huffman_encode(b"aaaabc")
    assert artifact == b"het\na 4\nb 1\nc 1\nhet\n11110001"
    assert huffman_decode(artifact) == b"aaaabc"


def test_single_symbol_uses_one_bit_per_byte():
    artifact = huffman_encode(b"aaaa")
    assert artifact == b"het\na 4\nhet\n0000"
    assert huffman_decode(artifact) == b"aaaa"


def test_single_byte_input():
    assert huffman_decode(huffman_encode(b"\x00")) == b"\x00"


def test_roundtrip_random():
    rng = random.Random(2024)
    for size in (1, 2, 3, 64, 10 * 1024):
        data = bytes(rng.getrandbits(8) for _ in range(size))
        assert huffman_decode(huffman_encode(data)) == data


def test_roundtrip_all_bytes_once():
    data = bytes(range(256))
    assert huffman_decode(huffman_encode(data)) == data


def test_roundtrip_data_that_looks_like_header():
    data = b"het\nhet\nh 1\nhet het\n0101 \t\r" * 3
    assert huffman_decode(huffman_encode(data)) == data


def test_encoding_is_deterministic():
    data = b"the quick brown fox jumps over the lazy dog" * 7
    assert huffman_encode(data) == huffman_encode(bytes(data))


SAMPLE = b"the quick brown fox jumps over the lazy dog\x00\xff" * 7


def _encode_in_subprocess(hash_seed: str) -> bytes:
    script = (
        "import sys\n"
        "from huffcodec import huffman_encode\n"
        "sys.stdout.buffer.write(huffman_encode(sys.stdin.buffer.read()))\n"
    )
    env = dict(os.environ, PYTHONHASHSEED=hash_seed, PYTHONPATH=str(PROJECT_ROOT))
    result = subprocess.run(
        [sys.executable, "-c", script],
        input=SAMPLE,
        capture_output=True,
        check=True,
        cwd=PROJECT_ROOT,
        env=env,
    )
    return result.stdout


def test_encoding_is_identical_across_processes():
    expected = huffman_encode(SAMPLE)
    assert _encode_in_subprocess("1") == expected
    assert _encode_in_subprocess("4242") == expected


def test_batch_module_imports_before_pipeline_package():
    script = "import huffcodec.utils.batch\nimport huffcodec.pipeline\n"
    subprocess.run(
        [sys.executable, "-c", script],
        check=True,
        cwd=PROJECT_ROOT,
        env=dict(os.environ, PYTHONPATH=str(PROJECT_ROOT)),
    )


def test_analyze_exposes_stages():
    encoded = analyze(b"aaaabc")
    assert encoded.freqs == {ord("a"): 4, ord("b"): 1, ord("c"): 1}
    assert encoded.codes[ord("a")] == "1"
    assert encoded.bits == "11110001"
    assert encoded.to_bytes() == huffman_encode(b"aaaabc")


def test_not_longer_than_reference_codec():
    data = b"mississippi river banks" * 40
    ours = analyze(data)
    assert len(ours.bits) <= len(reference_encode(data).bits)


def test_encode_empty_input_is_contract_violation():
    with pytest.raises(EmptyTreeError):
        huffman_encode(b"")


def test_decode_rejects_plain_text():
    with pytest.raises(FormatError, match="not a recognized encoded artifact"):
        huffman_decode(b"just some text")


def test_decode_rejects_truncated_code():
    artifact = huffman_encode(b"aaaabc")
    with pytest.raises(FormatError, match="middle of a code"):
        huffman_decode(artifact[:-1])


def test_decode_rejects_missing_symbols():
    # drops the final "01" code: still leaf aligned but one byte short
    artifact = huffman_encode(b"aaaabc")
    with pytest.raises(FormatError, match="header announces 6"):
        huffman_decode(artifact[:-2])


def test_decode_rejects_extra_symbols():
    with pytest.raises(FormatError, match="header announces 4"):
        huffman_decode(huffman_encode(b"aaaa") + b"0")


def test_decode_rejects_bad_payload_characters():
    artifact = huffman_encode(b"aaaabc")
    with pytest.raises(FormatError, match="invalid payload bit"):
        huffman_decode(artifact + b"2")


def test_decode_rejects_one_bit_on_single_leaf():
    with pytest.raises(FormatError, match="invalid payload bit '1'"):
        huffman_decode(b"het\na 2\nhet\n01")


def test_decode_rejects_empty_header():
    with pytest.raises(FormatError, match="no symbols"):
        huffman_decode(b"het\nhet\n")


def test_bitstream_contract_violations():
    with pytest.raises(ContractViolation):
        decode_bits("0", None)
    with pytest.raises(ContractViolation, match="no code"):
        encode_bits(b"ab", {ord("a"): "0"})


def test_decode_bits_walks_tree():
    root = build_tree({ord("a"): 4, ord("b"): 1, ord("c"): 1})
    assert decode_bits("0100111", root) == b"cbaaa"
