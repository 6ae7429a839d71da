from unittest.mock import MagicMock, patch

import pytest
import requests

from coindl.api.coingecko import CoinGeckoAPI
from coindl.api.request_utilities import build_url, get_env_var
from coindl.errors import NetworkError


def _response(payload=None, status_code=200, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    response.text = "not json"
    if json_error:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


def test_get_coin_request():
    """get_coin asks for the coin without tickers or localization"""
    api = CoinGeckoAPI(api_key="")

    with patch("requests.request", return_value=_response({"id": "bitcoin"})) as mock_request:
        result = api.get_coin("bitcoin")

    assert result == {"id": "bitcoin"}
    kwargs = mock_request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "https://api.coingecko.com/api/v3/coins/bitcoin"
    assert kwargs["params"]["localization"] == "false"
    assert kwargs["params"]["tickers"] == "false"
    assert "x-cg-demo-api-key" not in kwargs["headers"]


def test_api_key_header_sent_when_configured():
    api = CoinGeckoAPI(api_key="demo-key")

    with patch("requests.request", return_value=_response({"rates": {}})) as mock_request:
        api.get_exchange_rates()

    assert mock_request.call_args.kwargs["headers"]["x-cg-demo-api-key"] == "demo-key"
    assert mock_request.call_args.kwargs["url"].endswith("/exchange_rates")


def test_api_key_read_from_environment(monkeypatch):
    monkeypatch.setenv("COINGECKO_API_KEY", "env-key")

    api = CoinGeckoAPI()

    assert api.default_headers["x-cg-demo-api-key"] == "env-key"


def test_get_markets_params():
    api = CoinGeckoAPI(api_key="")

    with patch("requests.request", return_value=_response([])) as mock_request:
        api.get_markets("eur", ["bitcoin", "ethereum"])

    params = mock_request.call_args.kwargs["params"]
    assert params == {
        "vs_currency": "eur",
        "ids": "bitcoin,ethereum",
        "price_change_percentage": "1h,24h,7d,14d,30d",
    }


def test_get_markets_without_ids_drops_parameter():
    api = CoinGeckoAPI(api_key="")

    with patch("requests.request", return_value=_response([])) as mock_request:
        api.get_markets("usd", [])

    assert "ids" not in mock_request.call_args.kwargs["params"]


def test_http_error_raises_network_error_without_retry():
    api = CoinGeckoAPI(api_key="")
    response = _response({"error": "coin not found"}, status_code=404)

    with patch("requests.request", return_value=response) as mock_request:
        with pytest.raises(NetworkError) as exc_info:
            api.get_coin("notacoin")

    assert mock_request.call_count == 1
    assert exc_info.value.status_code == 404
    assert exc_info.value.response == {"error": "coin not found"}
    assert "coins/notacoin" in exc_info.value.message


def test_connection_error_raises_network_error():
    api = CoinGeckoAPI(api_key="")

    with patch("requests.request", side_effect=requests.ConnectionError("offline")):
        with pytest.raises(NetworkError) as exc_info:
            api.get_exchange_rates()

    assert exc_info.value.status_code is None
    assert "offline" in exc_info.value.message


def test_invalid_json_raises_network_error():
    api = CoinGeckoAPI(api_key="")

    with patch("requests.request", return_value=_response(json_error=True)):
        with pytest.raises(NetworkError) as exc_info:
            api.get_exchange_rates()

    assert exc_info.value.response == "not json"


def test_build_url_joins_with_one_slash():
    assert build_url("https://x.io/api", "coins/list") == "https://x.io/api/coins/list"
    assert build_url("https://x.io/api/", "/coins") == "https://x.io/api/coins"
    assert build_url("https://x.io/", "a") == "https://x.io/a"


def test_get_env_var(monkeypatch):
    monkeypatch.delenv("COINDL_MISSING_VAR", raising=False)
    monkeypatch.setenv("COINDL_PADDED_VAR", "  key \n")

    assert get_env_var("COINDL_MISSING_VAR", default="x") == "x"
    assert get_env_var("COINDL_PADDED_VAR") == "key"
