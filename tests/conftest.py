import pytest
from imgclassify.core.models import ClassifierResponse

class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else ""

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body

class FakeSession:
    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []
        self.auth = None
        self.closed = False

    def post(self, url, **kwargs):
        name, fh, ctype = next(iter(kwargs["files"].values()))
        self.calls.append({"url": url, "filename": name, "content_type": ctype,
                           "data": fh.read(), **{k: v for k, v in kwargs.items() if k != "files"}})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def close(self):
        self.closed = True

@pytest.fixture
def image_dir(tmp_path):
    d = tmp_path / "images"
    d.mkdir()
    for name in ["b.jpg", "a.PNG", "c.jpeg"]:
        (d / name).write_bytes(b"\x89fake-image-bytes")
    (d / "notes.txt").write_text("not an image")
    (d / "nested").mkdir()
    (d / "nested" / "d.jpg").write_bytes(b"nested")
    return d

def ok(payload, duration_ms=12.5):
    return ClassifierResponse(ok=True, status_code=200, payload=payload, duration_ms=duration_ms)

def failed(error="HTTP 500", duration_ms=3.0):
    return ClassifierResponse(ok=False, status_code=500, payload=None, duration_ms=duration_ms, error=error)
