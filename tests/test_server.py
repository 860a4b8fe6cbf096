from fastapi.testclient import TestClient
from server.app import app, label_for

client = TestClient(app)

def test_label_for():
    assert label_for("cat_01.jpg") == "cat"
    assert label_for("NEG-003.png") == "negative"
    assert label_for("dog-7.jpeg") == "dog"

def test_health():
    assert client.get("/health").json() == {"ok": True}

def test_classify_image():
    r = client.post("/classify", files={"file": ("cat_01.jpg", b"abc", "image/jpeg")})
    assert r.status_code == 200
    body = r.json()
    assert body["result"] == "ok"
    assert list(body["classified"]) == ["cat"]

def test_non_image_fails():
    r = client.post("/classify", files={"file": ("notes.txt", b"abc", "text/plain")})
    assert r.json()["result"] == "fail"

def test_basic_auth(monkeypatch):
    monkeypatch.setenv("STUB_USER", "amol")
    monkeypatch.setenv("STUB_PASSWD", "secret")
    files = {"file": ("cat.jpg", b"abc", "image/jpeg")}
    assert client.post("/classify", files=files).status_code == 401
    assert client.post("/classify", files=files, auth=("amol", "wrong")).status_code == 401
    assert client.post("/classify", files=files, auth=("amol", "secret")).status_code == 200
