import logging

from fastapi.testclient import TestClient
from tabparse.main import app, settings

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_parse_upload():
    raw = b'name,city\r\nPaul,"Montr\xc3\xa9al, QC"\r\n'

    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["records"] == [["name", "city"], ["Paul", "Montréal, QC"]]
    assert data["summary"]["rows"] == 2
    assert data["summary"]["columns"] == 2
    assert data["summary"]["encoding"] == "utf-8"

def test_parse_upload_strips_bom_and_detects_encoding():
    raw = "\ufeffa;b\n1;2\n".encode("utf-8")

    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/parse", files=files, params={"delimiter": ";", "encoding": "auto"})
    assert r.status_code == 200

    data = r.json()
    assert data["records"] == [["a", "b"], ["1", "2"]]
    assert data["summary"]["delimiter"] == ";"
    assert data["summary"]["detection"]["bom"] is True

def test_parse_upload_empty_file():
    files = {"file": ("empty.csv", b"", "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    assert r.json()["records"] == []
    assert r.json()["summary"]["columns"] is None

def test_parse_error_is_structured():
    files = {"file": ("test.csv", b"a,b,c\nd,e\n", "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 422

    detail = r.json()["detail"]
    assert detail["kind"] == "wrong_field_count"
    assert detail["line"] == 2
    assert detail["expected"] == 3
    assert detail["actual"] == 2

def test_invalid_dialect_rejected():
    files = {"file": ("test.csv", b"a,b\n", "text/csv")}
    r = client.post("/parse", files=files, params={"delimiter": "|", "quote": "|"})
    assert r.status_code == 422

def test_raw_encoding_rejected():
    files = {"file": ("test.csv", b"a,b\n", "text/csv")}
    r = client.post("/parse", files=files, params={"encoding": "raw"})
    assert r.status_code == 422

def test_only_delimited_text_accepted():
    files = {"file": ("test.xlsx", b"a,b\n", "application/octet-stream")}
    r = client.post("/parse", files=files)
    assert r.status_code == 422

def test_upload_size_limit(monkeypatch):
    monkeypatch.setattr(settings, "max_upload_bytes", 4)
    files = {"file": ("test.csv", b"a,b\nc,d\n", "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 413

def test_service_applies_log_level():
    assert logging.getLogger("tabparse").level == logging.getLevelName(settings.log_level)
