"""Unit tests for integrations module."""

from protrader.integrations import analytics_html, waitlist_html


class TestWaitlistHtml:
    """Tests for waitlist_html function."""

    def test_disabled_without_key(self) -> None:
        """Test no markup is rendered without a publishable key."""
        assert waitlist_html(publishable_key="") == ""

    def test_mounts_waitlist(self) -> None:
        """Test the script is loaded and the waitlist mounted."""
        markup = waitlist_html(publishable_key="pk_test_abc",
                               script_url="https://example.com/clerk.js")
        assert 'data-clerk-publishable-key="pk_test_abc"' in markup
        assert 'src="https://example.com/clerk.js"' in markup
        assert "mountWaitlist" in markup

    def test_key_is_escaped(self) -> None:
        """Test the key cannot break out of the attribute."""
        markup = waitlist_html(publishable_key='pk"><script>', script_url="x")
        assert '"><script>' not in markup


class TestAnalyticsHtml:
    """Tests for analytics_html function."""

    def test_disabled_without_id(self) -> None:
        """Test no snippet is rendered without a measurement id."""
        assert analytics_html(measurement_id="") == ""

    def test_includes_measurement_id(self) -> None:
        """Test the snippet configures the measurement id."""
        markup = analytics_html(measurement_id="G-TEST123")
        assert "gtag/js?id=G-TEST123" in markup
        assert 'gtag("config", "G-TEST123")' in markup
