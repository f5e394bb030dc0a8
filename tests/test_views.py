"""Unit tests for views module."""

from unittest.mock import MagicMock, patch

from protrader.models import HistoricalSeries
from protrader.views import LoadState, load_coin_view


class TestLoadCoinView:
    """Tests for load_coin_view function."""

    def test_loaded(self, sample_coin_payload: dict, sample_history: HistoricalSeries) -> None:
        """Test a detail payload and history load the view."""
        fetch_detail = MagicMock(return_value=sample_coin_payload)
        fetch_history = MagicMock(return_value=sample_history)

        view = load_coin_view("btc", fetch_detail=fetch_detail, fetch_history=fetch_history)

        assert view.state is LoadState.LOADED
        assert view.coin.name == "Bitcoin"
        assert len(view.history) == 30
        fetch_history.assert_called_once_with("bitcoin", days=30)

    def test_none_detail_is_error(self) -> None:
        """Test a failed detail fetch puts the view in error."""
        fetch_history = MagicMock()
        view = load_coin_view("bitcoin", fetch_detail=MagicMock(return_value=None),
                              fetch_history=fetch_history)
        assert view.state is LoadState.ERROR
        assert view.coin is None
        fetch_history.assert_not_called()

    def test_payload_without_market_data_is_error(self) -> None:
        """Test an unparsable payload puts the view in error."""
        payload = {"id": "bitcoin", "name": "Bitcoin", "symbol": "btc"}
        view = load_coin_view("bitcoin", fetch_detail=MagicMock(return_value=payload),
                              fetch_history=MagicMock())
        assert view.state is LoadState.ERROR

    def test_missing_history_still_loaded(self, sample_coin_payload: dict) -> None:
        """Test the view loads without history."""
        view = load_coin_view("bitcoin",
                              fetch_detail=MagicMock(return_value=sample_coin_payload),
                              fetch_history=MagicMock(return_value=None))
        assert view.state is LoadState.LOADED
        assert view.history is None

    def test_http_404_renders_error_state(self, make_response) -> None:
        """Test a 404 from the API ends in the error branch without raising."""
        with patch("protrader.market_data.requests.get") as mock_get:
            mock_get.return_value = make_response({"error": "coin not found"},
                                                  status_code=404)
            view = load_coin_view("no-such-coin")

        assert view.state is LoadState.ERROR
        assert mock_get.call_count == 1
