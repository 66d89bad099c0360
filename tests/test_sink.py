import pytest

from ringlog.ring_buffer import RingBuffer
from ringlog.sink import Sink
from ringlog.writer import WriterType


def test_sink_writes_buffered_items_to_file(tmp_path):
    path = tmp_path / "out.log"
    buffer = RingBuffer(10)
    messages = ["first\n", "second\n", "third\n"]
    for message in messages:
        assert buffer.push(message)
    sink = Sink(buffer, [WriterType.FILE], path)
    sink.finish()
    assert path.read_text(encoding="utf-8") == "".join(messages)
    assert buffer.is_empty()


def test_sink_picks_up_items_pushed_after_start(tmp_path):
    path = tmp_path / "late.log"
    buffer = RingBuffer(100)
    sink = Sink(buffer, [WriterType.FILE], path)
    messages = [f"line {n}\n" for n in range(50)]
    for message in messages:
        assert buffer.push(message)
    sink.finish()
    assert path.read_text(encoding="utf-8").splitlines(keepends=True) == messages


def test_sink_writes_to_stdout(capsys):
    buffer = RingBuffer(5)
    buffer.push("hello ")
    buffer.push("world")
    sink = Sink(buffer, [WriterType.STDOUT])
    sink.finish()
    assert capsys.readouterr().out == "hello world"


def test_sink_fans_out_to_all_writers(tmp_path, capsys):
    path = tmp_path / "both.log"
    buffer = RingBuffer(5)
    buffer.push("shared\n")
    sink = Sink(buffer, [WriterType.STDOUT, WriterType.FILE], path)
    sink.finish()
    assert capsys.readouterr().out == "shared\n"
    assert path.read_text(encoding="utf-8") == "shared\n"
    assert [writer.name() for writer in sink.writers] == ["ConsoleWriter", "FileWriter"]


def test_sink_without_writers_drains_buffer():
    buffer = RingBuffer(5)
    buffer.push("dropped")
    sink = Sink(buffer, [])
    sink.finish()
    assert buffer.is_empty()
    assert sink.writers == []


def test_sink_finish_is_idempotent(tmp_path):
    path = tmp_path / "twice.log"
    buffer = RingBuffer(5)
    buffer.push("once\n")
    sink = Sink(buffer, [WriterType.FILE], path)
    sink.finish()
    sink.finish()
    assert path.read_text(encoding="utf-8") == "once\n"


def test_sink_file_writer_requires_filename():
    with pytest.raises(ValueError):
        Sink(RingBuffer(5), [WriterType.FILE])


def test_sink_refuses_existing_file(tmp_path):
    path = tmp_path / "exists.log"
    path.write_text("old", encoding="utf-8")
    with pytest.raises(FileExistsError):
        Sink(RingBuffer(5), [WriterType.FILE], path)
    assert path.read_text(encoding="utf-8") == "old"