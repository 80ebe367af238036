import io
import json

import pytest

from feedprocessor.main import main

SHARED = "1,1,4CA2D6,1,2017/12/23,16:01:15.429,2017/12/23,16:01:15.455"


def test_main_writes_json_lines(tmp_path):
    capture = tmp_path / "capture.sbs"
    capture.write_text(
        f"AIR,,{SHARED}\n"
        f"MSG,6,{SHARED},,35000,,,,,,7700,0,1,0,0\n"
        f"STA,,{SHARED},ZZ\n"
    )
    out = io.StringIO()

    assert main([str(capture)], out=out) == 0

    documents = [json.loads(line) for line in out.getvalue().splitlines()]
    assert [d["message_type"] for d in documents] == ["AIR", "MSG"]
    assert documents[1]["squawk"] == 7700
    assert documents[1]["emergency"] is True
    assert documents[1]["creation_timestamp"].startswith("2017-12-23T16:01:15.429")


def test_main_reports_failure_when_stopping_on_error(tmp_path):
    capture = tmp_path / "capture.sbs"
    capture.write_text(f"AIR,,{SHARED}\nMSG,3,{SHARED}\n")
    out = io.StringIO()

    assert main([str(capture), "--stop-on-error"], out=out) == 1
    assert len(out.getvalue().splitlines()) == 1


def test_main_rejects_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.sbs")], out=io.StringIO())

    assert excinfo.value.code == 2
    assert "missing.sbs" in capsys.readouterr().err
