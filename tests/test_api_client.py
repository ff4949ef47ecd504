import requests

from sortlab.demo_files import api_client


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


def test_sort_remote_posts_values(monkeypatch):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json))
        return FakeResponse({"values": sorted(json["values"]), "algorithm": json["algorithm"]})

    monkeypatch.setattr(api_client.requests, "post", fake_post)
    result = api_client.sort_remote((3, 1, 2), algorithm="shuttle", base_url="http://sorter")

    assert calls == [("http://sorter/sort", {"values": [3, 1, 2], "algorithm": "shuttle"})]
    assert result == {"values": [1, 2, 3], "algorithm": "shuttle"}


def test_sort_remote_http_error(monkeypatch, capsys):
    monkeypatch.setattr(api_client.requests, "post", lambda url, json=None, timeout=None: FakeResponse({}, 422))

    assert api_client.sort_remote([1], algorithm="bogo") is None
    assert "Error sorting remotely" in capsys.readouterr().out


def test_sort_remote_connection_error(monkeypatch, capsys):
    def refuse(url, json=None, timeout=None):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(api_client.requests, "post", refuse)

    assert api_client.sort_remote([2, 1]) is None
    assert "refused" in capsys.readouterr().out
