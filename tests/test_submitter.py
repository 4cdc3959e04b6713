import asyncio

from starlette.requests import Request

from jobboard.config import settings
from jobboard.dependencies import UNKNOWN_SUBMITTER, resolve_submitter_id
from jobboard.main import app


def _request(headers=None, client=("192.0.2.10", 50000)):
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "POST", "path": "/", "headers": raw, "client": client})


def _resolve(request):
    return asyncio.run(resolve_submitter_id(request))


class TestResolveSubmitter:
    def test_prefers_forwarded_for(self):
        req = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.1", "X-Real-IP": "198.51.100.2"})
        assert _resolve(req) == "203.0.113.7"

    def test_falls_back_to_real_ip(self):
        assert _resolve(_request({"X-Real-IP": "198.51.100.2"})) == "198.51.100.2"

    def test_blank_forwarded_for_ignored(self):
        assert _resolve(_request({"X-Forwarded-For": " "})) == "192.0.2.10"

    def test_falls_back_to_peer(self):
        assert _resolve(_request()) == "192.0.2.10"

    def test_unknown_without_origin(self):
        assert _resolve(_request(client=None)) == UNKNOWN_SUBMITTER

    def test_untrusted_forwarded_headers(self, monkeypatch):
        monkeypatch.setattr(settings, "trust_forwarded_headers", False)
        assert _resolve(_request({"X-Forwarded-For": "203.0.113.7"})) == "192.0.2.10"


class TestCustomSubmitterStrategy:
    def test_override_shares_bucket(self, client, job_payload):
        app.dependency_overrides[resolve_submitter_id] = lambda: UNKNOWN_SUBMITTER
        try:
            a = {"X-Forwarded-For": "203.0.113.7"}
            b = {"X-Forwarded-For": "198.51.100.2"}
            assert client.post("/api/v1/post-job", json=job_payload(), headers=a).status_code == 200
            assert client.post("/api/v1/post-job", json=job_payload(), headers=b).status_code == 429
        finally:
            app.dependency_overrides.pop(resolve_submitter_id, None)
