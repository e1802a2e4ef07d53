import datetime
import os
import struct

import pytest

from beelog import util
from beelog.severity import Severity


def test_get_datetime_full_default_format():
    text = util.get_datetime()
    parsed = datetime.datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.datetime.now() - parsed).total_seconds()) < 5


def test_get_datetime_file_name_format():
    text = util.get_datetime(False, True)
    parsed = datetime.datetime.strptime(text, "%Y_%m_%d_%H_%M_%S")
    assert " " not in text
    assert parsed.year == datetime.datetime.now().year


def test_get_datetime_only_date_variants():
    today = datetime.date.today()
    assert util.get_datetime(True, True) == today.strftime("%Y-%m-%d")
    assert util.get_datetime(True) == today.strftime("%Y_%m_%d")


def test_create_dir_nested(tmp_path):
    path = f"{tmp_path.as_posix()}/a/b/c"
    result = util.create_dir(path)
    assert result == path
    assert os.path.isdir(path)


def test_create_dir_existing_returns_path(tmp_path):
    path = tmp_path.as_posix()
    assert util.create_dir(path) == path


def test_create_dir_relative(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = util.create_dir("./x/y")
    assert result == "./x/y"
    assert (tmp_path / "x" / "y").is_dir()


def test_write_file_text_and_bytes(tmp_path):
    path = f"{tmp_path.as_posix()}/out/sub/data.bin"
    with util.WriteFile() as wf:
        wf.open(path)
        assert wf.file_path == path
        wf.write("héllo")
        wf.write(b"\x00\x01")
        wf.write(bytearray(b"z"))
    assert (tmp_path / "out" / "sub" / "data.bin").read_bytes() == (
        "héllo".encode("utf-8") + b"\x00\x01z"
    )


def test_write_file_appends(tmp_path):
    path = f"{tmp_path.as_posix()}/log.txt"
    for chunk in ("one", "two"):
        opened = util.WriteFile().open(path)
        assert opened.file_path == path
        opened.write(chunk)
        opened.close()
    assert (tmp_path / "log.txt").read_text() == "onetwo"


def test_write_file_bare_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    wf = util.WriteFile().open("plain.txt")
    wf.write("abc")
    wf.close()
    assert wf.file_path == "plain.txt"
    assert (tmp_path / "plain.txt").read_text() == "abc"


def test_write_file_empty_name_raises(tmp_path):
    with pytest.raises(ValueError):
        util.WriteFile().open(f"{tmp_path.as_posix()}/dir/")


def test_write_before_open_raises():
    with pytest.raises(ValueError):
        util.WriteFile().write("x")


def test_write_after_close_raises(tmp_path):
    wf = util.WriteFile().open(f"{tmp_path.as_posix()}/f.txt")
    wf.close()
    with pytest.raises(ValueError):
        wf.write(b"x")


def test_float_ieee_one():
    assert util.bytes_to_float(b"\x00\x00\x80\x3f") == 1.0
    assert util.bytes_to_float(b"\x3f\x80\x00\x00", little_endian=False) == 1.0


@pytest.mark.parametrize("value", [0.0, -2.5, 1e100, 3.141592653589793])
def test_double_round_trip(value):
    assert util.bytes_to_double(struct.pack("<d", value)) == value
    assert util.bytes_to_double(struct.pack(">d", value), little_endian=False) == value


@pytest.mark.parametrize("value", [0, 1, -1, 32767, -32768])
def test_short_round_trip(value):
    assert util.bytes_to_short(struct.pack("<h", value)) == value
    assert util.bytes_to_short(struct.pack(">h", value), False) == value


@pytest.mark.parametrize("value", [0, 1, 65535, 4660])
def test_ushort_round_trip(value):
    assert util.bytes_to_ushort(struct.pack("<H", value)) == value
    assert util.bytes_to_ushort(struct.pack(">H", value), False) == value


@pytest.mark.parametrize("value", [0, -1, 305419896, -2147483648, 2147483647])
def test_int_round_trip(value):
    assert util.bytes_to_int(struct.pack("<i", value)) == value
    assert util.bytes_to_int(struct.pack(">i", value), False) == value


@pytest.mark.parametrize("value", [0, 4294967295, 305419896])
def test_uint_round_trip(value):
    assert util.bytes_to_uint(struct.pack("<I", value)) == value
    assert util.bytes_to_uint(struct.pack(">I", value), False) == value


@pytest.mark.parametrize("value", [0, 1, -1, 8388607, -8388608, -1000, 1000])
def test_bytes3_round_trip(value):
    little = struct.pack("<i", value)[:3]
    big = struct.pack(">i", value)[1:]
    assert util.bytes3_to_int(little) == value
    assert util.bytes3_to_int(big, little_endian=False) == value


def test_byte_order_matters():
    data = bytes([0x12, 0x34, 0x56, 0x78])
    assert util.bytes_to_uint(data) == int.from_bytes(data, "little")
    assert util.bytes_to_uint(data, False) == int.from_bytes(data, "big")


def test_short_input_raises():
    with pytest.raises(ValueError):
        util.bytes_to_int(b"\x01\x02")
    with pytest.raises(ValueError):
        util.bytes3_to_int(b"\x01")


def test_ini_round_trip(tmp_path):
    path = str(tmp_path / "settings.ini")
    util.write_ini(path, "port/name", "COM3")
    util.write_ini(path, "port/baud", 115200)
    util.write_ini(path, "plain", True)
    assert util.read_ini(path, "port/name") == "COM3"
    assert util.read_ini(path, "port/baud") == "115200"
    assert util.read_ini(path, "plain") == "true"


def test_ini_overwrite_and_missing(tmp_path):
    path = str(tmp_path / "s.ini")
    util.write_ini(path, "a/key", "first")
    util.write_ini(path, "a/key", "second")
    assert util.read_ini(path, "a/key") == "second"
    assert util.read_ini(path, "a/other") is None
    assert util.read_ini(str(tmp_path / "absent.ini"), "a/key") is None


def test_log_init_creates_log_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    logger = util.log_init(2000)
    assert logger.max_severity == Severity.DEBUG
    assert (tmp_path / "log").is_dir()
    record = logger.log(Severity.INFO, "started")
    assert record.message == "started"
    log_file = tmp_path / "log" / (util.get_datetime(True) + ".log")
    assert "started" in log_file.read_text(encoding="utf-8-sig")
    assert util.log_init() is logger