"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

import pytest
import requests

from weather_lookup.cli import (
    cmd_history,
    cmd_info,
    cmd_show,
    cmd_suggest,
    create_parser,
    history_store,
    main,
    render_forecast,
)
from weather_lookup.config import Settings
from weather_lookup.datasources.open_meteo import LocationNotFoundError
from weather_lookup.schemas import (
    CurrentWeather,
    DailyForecastItem,
    Forecast,
    HourlyForecastItem,
    Icon,
    Location,
)

PARIS = Location(name="Paris, Île-de-France, France", lat=48.85341, lon=2.3488)
TOKYO = Location(name="Tokyo, Tokyo, Japan", lat=35.6895, lon=139.69171)


def _forecast(loc: Location = PARIS) -> Forecast:
    return Forecast(
        location=loc,
        current=CurrentWeather(
            temperature=25, condition="Clear sky", humidity=40, wind_speed=12, feels_like=26
        ),
        hourly=[HourlyForecastItem(time="08:00", temp=20, icon=Icon.SUNNY)],
        daily=[
            DailyForecastItem(day="Today", high=27, low=15, condition="Clear sky", icon=Icon.SUNNY)
        ],
    )


@pytest.fixture
def settings(tmp_path: Path) -> Iterator[Settings]:
    """Settings with history under a temp dir."""
    s = Settings(_env_file=None, data_dir=tmp_path, celsius=True)
    with patch("weather_lookup.cli.get_settings", return_value=s):
        yield s


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "weather-lookup"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    def test_show_defaults(self) -> None:
        """Show takes an optional city and no unit override by default."""
        args = create_parser().parse_args(["show"])
        assert args.command == "show"
        assert args.city is None
        assert args.celsius is None

    def test_show_fahrenheit(self) -> None:
        """Show accepts -f to switch to Fahrenheit."""
        args = create_parser().parse_args(["show", "Paris", "-f"])
        assert args.city == "Paris"
        assert args.celsius is False

    def test_show_celsius(self) -> None:
        """Show accepts --celsius."""
        args = create_parser().parse_args(["show", "Paris", "--celsius"])
        assert args.celsius is True

    def test_show_units_exclusive(self) -> None:
        """Both unit flags together is an error."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["show", "-c", "-f"])

    def test_history_clear(self) -> None:
        """History accepts --clear."""
        args = create_parser().parse_args(["history", "--clear"])
        assert args.clear is True

    def test_suggest_count(self) -> None:
        """Suggest has a default count."""
        args = create_parser().parse_args(["suggest", "Dub"])
        assert args.query == "Dub"
        assert args.count == 5


class TestRenderForecast:
    """Tests for the plain-text forecast summary."""

    def test_celsius(self) -> None:
        text = render_forecast(_forecast(), is_celsius=True)
        assert text.startswith("Paris, Île-de-France, France")
        assert "25°C  Clear sky" in text
        assert "Feels like 26°C" in text
        assert "27°C / 15°C" in text

    def test_fahrenheit(self) -> None:
        text = render_forecast(_forecast(), is_celsius=False)
        assert "77°F  Clear sky" in text
        assert "68°F" in text

    def test_missing_values(self) -> None:
        forecast = Forecast(location=PARIS)
        text = render_forecast(forecast)
        assert "--°  Unknown" in text
        assert "Humidity --°" in text
        assert "Next hours" not in text


class TestCmdShow:
    """Tests for cmd_show function."""

    def test_records_searched_city(self, settings: Settings) -> None:
        args = argparse.Namespace(city="Paris", celsius=None)
        with (
            patch("weather_lookup.cli.resolve", return_value=PARIS),
            patch("weather_lookup.cli.lookup", return_value=_forecast()),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_show(args) == 0
            assert "25°C" in mock_stdout.getvalue()

        assert history_store(settings).load() == [PARIS]

    def test_default_location_not_recorded(self, settings: Settings) -> None:
        args = argparse.Namespace(city=None, celsius=False)
        with (
            patch("weather_lookup.cli.lookup", return_value=_forecast()) as mock_lookup,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_show(args) == 0
            assert "77°F" in mock_stdout.getvalue()

        assert mock_lookup.call_args.args[0].name == settings.default_location
        assert history_store(settings).load() == []

    def test_moves_repeat_search_to_front(self, settings: Settings) -> None:
        history_store(settings).save([TOKYO, PARIS])
        args = argparse.Namespace(city="Paris", celsius=None)
        with (
            patch("weather_lookup.cli.resolve", return_value=PARIS),
            patch("weather_lookup.cli.lookup", return_value=_forecast()),
            patch("sys.stdout", new=StringIO()),
        ):
            cmd_show(args)

        assert history_store(settings).load() == [PARIS, TOKYO]

    def test_not_found_returns_one(self, settings: Settings) -> None:
        args = argparse.Namespace(city="Atlantis", celsius=None)
        with (
            patch("weather_lookup.cli.resolve", side_effect=LocationNotFoundError("Atlantis")),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_show(args) == 1
            assert "Atlantis" in mock_stderr.getvalue()

        assert history_store(settings).load() == []

    def test_network_error_returns_one(self, settings: Settings) -> None:
        args = argparse.Namespace(city="Paris", celsius=None)
        with (
            patch("weather_lookup.cli.resolve", return_value=PARIS),
            patch("weather_lookup.cli.lookup", side_effect=requests.ConnectionError("down")),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_show(args) == 1
            assert "unable to load weather" in mock_stderr.getvalue()


class TestCmdSuggest:
    """Tests for cmd_suggest function."""

    def test_lists_matches(self) -> None:
        args = argparse.Namespace(query="Par", count=5)
        with (
            patch("weather_lookup.cli.suggest", return_value=[PARIS]) as mock_suggest,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_suggest(args) == 0
            assert PARIS.name in mock_stdout.getvalue()
            mock_suggest.assert_called_once_with("Par", count=5)

    def test_no_results(self) -> None:
        args = argparse.Namespace(query="zzzz", count=5)
        with (
            patch("weather_lookup.cli.suggest", return_value=[]),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_suggest(args) == 1
            assert "No results" in mock_stderr.getvalue()


class TestCmdHistory:
    """Tests for cmd_history function."""

    def test_empty(self, settings: Settings) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            assert cmd_history(argparse.Namespace(clear=False)) == 0
            assert "No recent searches" in mock_stdout.getvalue()

    def test_lists_most_recent_first(self, settings: Settings) -> None:
        history_store(settings).save([TOKYO, PARIS])
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_history(argparse.Namespace(clear=False))
            output = mock_stdout.getvalue()
        assert output.index(TOKYO.name) < output.index(PARIS.name)

    def test_clear(self, settings: Settings) -> None:
        history_store(settings).save([TOKYO])
        with patch("sys.stdout", new=StringIO()):
            assert cmd_history(argparse.Namespace(clear=True)) == 0
        assert history_store(settings).load() == []


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_prints_app_info(self, settings: Settings) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            assert cmd_info(argparse.Namespace()) == 0
            output = mock_stdout.getvalue()
        assert "Application: weather-lookup" in output
        assert str(settings.data_dir) in output


class TestMain:
    """Tests for main entry point."""

    def test_no_command_prints_help(self, settings: Settings) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            assert main([]) == 0
            assert "weather-lookup" in mock_stdout.getvalue()

    def test_dispatches_info(self, settings: Settings) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            assert main(["info"]) == 0
            assert "Version" in mock_stdout.getvalue()
