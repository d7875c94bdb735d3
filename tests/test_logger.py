import io
import json

import pytest

from pqdijkstra.logger import StdLogger


def test_level_filtering():
    stream = io.StringIO()
    log = StdLogger(level="info", stream=stream)
    log.debug("hidden", a=1)
    log.info("shown", a=1, b="x")
    log.warning("also")
    assert stream.getvalue().splitlines() == ["info shown a=1 b=x", "warning also"]


def test_json_format():
    stream = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=stream).debug("relax", u=1, v=2)
    assert json.loads(stream.getvalue()) == {"level": "debug", "event": "relax", "u": 1, "v": 2}


def test_timestamps():
    stream = io.StringIO()
    StdLogger(level="info", json_fmt=True, stream=stream, timestamps=True).info("tick")
    assert "ts" in json.loads(stream.getvalue())


def test_unknown_level():
    with pytest.raises(ValueError):
        StdLogger(level="chatty")
