import json

import pytest

from rscodec.cli import (
    bytes_to_hex_strings,
    format_array,
    hex_strings_to_bytes,
    lagrange_decode_main,
    lagrange_encode_main,
    vandermonde_decode_main,
    vandermonde_encode_main,
)
from rscodec.field import GaloisField
from rscodec.lagrange import LagrangeDecoder, LagrangeEncoder
from rscodec.vandermonde import VandermondeDecoder, VandermondeEncoder

MESSAGE = ["0x48", "0x65", "0x6c", "0x6c", "0x6f", "0x21"]
MESSAGE_BYTES = bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F, 0x21])


def _write(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def test_hex_strings_to_bytes_with_and_without_prefix():
    assert hex_strings_to_bytes(["0x01", "ff", "0xAB"]) == bytes([0x01, 0xFF, 0xAB])


def test_hex_strings_to_bytes_unreadable_values_become_zero():
    assert hex_strings_to_bytes(["zz", "0x100", ""]) == bytes([0, 0, 0])


def test_hex_strings_round_trip():
    data = bytes(range(256))
    assert hex_strings_to_bytes(bytes_to_hex_strings(data)) == data


def test_bytes_to_hex_strings_format():
    assert bytes_to_hex_strings(b"\x00\x0a\xff") == ["0x00", "0x0a", "0xff"]


def test_format_array():
    assert format_array(bytes([1, 2])) == "[ 1 2 ]\nHexadecimal: [ 0x01 0x02 ]"


@pytest.mark.parametrize(
    "main, encoder_cls, decoder_cls",
    [
        (lagrange_encode_main, LagrangeEncoder, LagrangeDecoder),
        (vandermonde_encode_main, VandermondeEncoder, VandermondeDecoder),
    ],
)
def test_encode_main_writes_codeword(tmp_path, capsys, main, encoder_cls, decoder_cls):
    source = _write(tmp_path / "message.json", {"message": MESSAGE})
    target = tmp_path / "encoded.json"
    assert main([source, str(target)]) == 0

    document = json.loads(target.read_text(encoding="utf-8"))
    assert document["message"] == MESSAGE
    encoded = hex_strings_to_bytes(document["encoded"])
    assert len(encoded) == 18
    assert encoded[:6] == MESSAGE_BYTES

    field = GaloisField(0x1D)
    assert encoded == encoder_cls(field, 6, 12).encode(MESSAGE_BYTES)
    assert decoder_cls(field, 6, 18).decode_last_shards(encoded) == MESSAGE_BYTES

    out = capsys.readouterr().out
    assert "Original message (message shards):" in out
    assert "Encoding result has been saved to" in out


def test_encode_output_layout(tmp_path):
    source = _write(tmp_path / "message.json", {"message": MESSAGE})
    target = tmp_path / "encoded.json"
    lagrange_encode_main([source, str(target)])
    text = target.read_text(encoding="utf-8")
    assert text.startswith('{\n  "message": [\n    "0x48"')
    assert not text.endswith("\n")


def test_vandermonde_encode_prints_progress(tmp_path, capsys):
    source = _write(tmp_path / "message.json", {"message": MESSAGE})
    vandermonde_encode_main([source, str(tmp_path / "out.json")])
    out = capsys.readouterr().out
    assert "Vandermonde encoding at position 6" in out
    assert "by Vandermonde method" in out


@pytest.mark.parametrize(
    "main, encoder_cls",
    [
        (lagrange_decode_main, LagrangeEncoder),
        (vandermonde_decode_main, VandermondeEncoder),
    ],
)
def test_decode_main_recovers_message(tmp_path, capsys, main, encoder_cls):
    encoded = encoder_cls(GaloisField(0x1D), 6, 12).encode(MESSAGE_BYTES)
    shards = bytes_to_hex_strings(encoded[12:])
    source = _write(tmp_path / "shards.json", {"message": shards, "start_index": 12})
    target = tmp_path / "decoded.json"
    assert main([source, str(target)]) == 0

    document = json.loads(target.read_text(encoding="utf-8"))
    assert document["encoded_shards"] == shards
    assert document["decoded_data"] == MESSAGE

    out = capsys.readouterr().out
    assert "Used shard indices: [12 13 14 15 16 17]" in out
    assert "Decoding result saved to" in out


def test_decode_defaults_to_start_index_zero(tmp_path):
    source = _write(tmp_path / "shards.json", {"message": MESSAGE})
    target = tmp_path / "decoded.json"
    assert lagrange_decode_main([source, str(target)]) == 0
    document = json.loads(target.read_text(encoding="utf-8"))
    assert document["decoded_data"] == MESSAGE


def test_decode_too_few_shards_fails(tmp_path):
    source = _write(tmp_path / "shards.json", {"message": MESSAGE[:3]})
    target = tmp_path / "decoded.json"
    assert lagrange_decode_main([source, str(target)]) == 1
    assert not target.exists()


def test_decode_rejects_non_integer_start_index(tmp_path, capsys):
    source = _write(tmp_path / "shards.json", {"message": MESSAGE, "start_index": "twelve"})
    assert vandermonde_decode_main([source, str(tmp_path / "out.json")]) == 1
    assert "Cannot read input file" in capsys.readouterr().out


@pytest.mark.parametrize(
    "main", [lagrange_encode_main, lagrange_decode_main, vandermonde_encode_main, vandermonde_decode_main]
)
def test_usage_when_arguments_missing(capsys, main):
    assert main(["only-one"]) == 2
    assert capsys.readouterr().out.startswith("Usage:")


def test_missing_input_file(tmp_path, capsys):
    missing = str(tmp_path / "absent.json")
    assert lagrange_encode_main([missing, str(tmp_path / "out.json")]) == 1
    assert "Unable to read input file" in capsys.readouterr().out


def test_invalid_json_input(tmp_path, capsys):
    source = tmp_path / "broken.json"
    source.write_text("{not json", encoding="utf-8")
    assert vandermonde_encode_main([str(source), str(tmp_path / "out.json")]) == 1
    assert "Unable to read input file" in capsys.readouterr().out