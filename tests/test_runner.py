import io

import pytest

from savvyshopper.domain import AuthError, NetworkError, NoResultsError, Offer, Retailer
from savvyshopper.runner import main, run


class _Stub:
    def __init__(self, retailer, error=None):
        self.retailer = retailer
        self.error = error
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return [
            Offer("Test Product 1", 19.99, "https://example.com/1", self.retailer),
            Offer("Test Product 2", 29.99, "https://example.com/2", self.retailer),
            Offer("Test Product 3", 39.99, "https://example.com/3", self.retailer),
        ]


@pytest.fixture
def with_key(monkeypatch):
    monkeypatch.setenv("ZINC_API_KEY", "placeholder")


def _stubs(error=None):
    return {
        Retailer.AMAZON: _Stub(Retailer.AMAZON, error),
        Retailer.WALMART: _Stub(Retailer.WALMART, error),
    }


def test_runner_end_to_end(with_key):
    out = io.StringIO()
    searchers = _stubs()
    run(["test query"], out, searchers)
    output = out.getvalue()
    assert "$" in output
    assert "Amazon" in output and "Walmart" in output
    assert searchers[Retailer.AMAZON].queries == ["test query"]
    assert len(output.splitlines()) == 7


def test_runner_missing_key(monkeypatch):
    monkeypatch.delenv("ZINC_API_KEY", raising=False)
    out = io.StringIO()
    with pytest.raises(AuthError):
        run(["widget"], out, _stubs())
    assert out.getvalue() == "\033[31mError: authentication error\033[0m\n"


def test_runner_no_results(with_key):
    out = io.StringIO()
    with pytest.raises(NoResultsError):
        run(["widget"], out, {Retailer.AMAZON: _Stub(Retailer.AMAZON, RuntimeError("odd"))})
    assert out.getvalue() == "\033[33mNo results found.\033[0m\n"


def test_runner_network_error(with_key):
    out = io.StringIO()
    with pytest.raises(NetworkError):
        run(["widget"], out, _stubs(NetworkError("boom")))
    assert "Network error: network error: boom" in out.getvalue()


def test_runner_prompts_for_query(with_key, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("widget\n"))
    out = io.StringIO()
    searchers = _stubs()
    run([], out, searchers)
    assert out.getvalue().startswith("Enter product: Title")
    assert searchers[Retailer.WALMART].queries == ["widget"]


def test_runner_rejects_multiword_input(with_key, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("two words\n"))
    with pytest.raises(ValueError, match="failed to read input"):
        run([], io.StringIO(), _stubs())


def test_runner_rejects_empty_input(with_key, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(ValueError, match="failed to read input"):
        run([], io.StringIO(), _stubs())


def test_main_returns_one_without_key(monkeypatch, capsys):
    monkeypatch.delenv("ZINC_API_KEY", raising=False)
    assert main(["widget"]) == 1
    assert "authentication error" in capsys.readouterr().out