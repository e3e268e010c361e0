import asyncio
import io
from datetime import datetime, timezone

import httpx
import pytest

import main as entry
from config import Settings
from domain.entities import MatchWindow
from domain.enums import LossMode, OutputMode, Region
from domain.errors import ConfigurationError
from infrastructure.api import RiotAPIClient
from presentation.cli import LossesCommand, apply_arguments, build_parser
from tests.helpers import PUUID, T1_MS, match_payload

APRIL = MatchWindow(
    datetime(2024, 4, 1, tzinfo=timezone.utc),
    datetime(2024, 4, 30, 23, 59, 59, tzinfo=timezone.utc),
)

MATCHES = {
    "NA1_1": match_payload("NA1_1", champion_id=103, champion_name="Ahri", start_ms=T1_MS),
    "NA1_2": match_payload("NA1_2", win=True),
    "NA1_3": match_payload("NA1_3", champion_id=103, champion_name="Ahri", start_ms=T1_MS + 3_600_000),
    "NA1_4": match_payload("NA1_4", champion_id=1, champion_name=None, start_ms=T1_MS + 7_200_000),
}


def _riot_api(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path.startswith("/riot/account/v1/accounts/by-riot-id/"):
        if path.endswith("/Player/NA1"):
            return httpx.Response(200, json={"puuid": PUUID, "gameName": "Player", "tagLine": "NA1"})
        return httpx.Response(404)
    if path.endswith("/ids"):
        start = int(request.url.params["start"])
        ids = list(MATCHES)
        return httpx.Response(200, json=ids[start:start + 2])
    if path.startswith("/lol/match/v5/matches/"):
        match_id = path.rsplit("/", 1)[-1]
        if match_id in MATCHES:
            return httpx.Response(200, json=MATCHES[match_id])
        return httpx.Response(404)
    return httpx.Response(500)


def _settings(**changes):
    base = Settings(
        riot_api_key="RGAPI-test",
        game_name="Player",
        tag_line="NA1",
        window=APRIL,
        log_level="WARNING",
    )
    return base.with_overrides(**changes)


def _client(settings, handler=_riot_api):
    return RiotAPIClient(settings.riot_api_key, transport=httpx.MockTransport(handler), max_retries=0)


def _command_output(settings):
    out = io.StringIO()
    code = asyncio.run(LossesCommand(settings, out, client=_client(settings)).run())
    return code, out.getvalue().splitlines()


def test_champions_report_lists_each_champion_once():
    code, lines = _command_output(_settings())
    assert code == 0
    assert lines == ["Ahri", "UNKNOWN"]


def test_losses_report_lists_every_loss():
    code, lines = _command_output(_settings(output_mode=OutputMode.LOSSES, max_concurrent_requests=1))
    assert code == 0
    assert [line.split("\t")[2] for line in lines] == ["NA1_1", "NA1_3", "NA1_4"]
    assert lines[0].startswith("Ahri\t")


def test_apply_arguments_overrides_settings():
    args = build_parser().parse_args(
        ["--region", "kr", "--from", "2024-04-01", "--to", "2024-04-30", "--mode", "permissive",
         "--output", "losses", "--sequential"]
    )
    settings = apply_arguments(_settings(), args)
    assert settings.region is Region.KR
    assert settings.loss_mode is LossMode.PERMISSIVE
    assert settings.output_mode is OutputMode.LOSSES
    assert settings.max_concurrent_requests == 1
    assert settings.window.start.date() == datetime(2024, 4, 1).date()
    assert settings.window.end.date() == datetime(2024, 4, 30).date()


def test_apply_arguments_without_flags_keeps_settings():
    settings = _settings()
    assert apply_arguments(settings, build_parser().parse_args([])) == settings


@pytest.mark.parametrize(
    "argv",
    [["--region", "moon"], ["--from", "yesterday"], ["--concurrency", "0"], ["--from", "2024-05-01", "--to", "2024-04-01"]],
)
def test_apply_arguments_rejects_bad_flags(argv):
    with pytest.raises(ConfigurationError):
        apply_arguments(_settings(), build_parser().parse_args(argv))


@pytest.fixture
def mock_riot(monkeypatch):
    def _install(handler=_riot_api):
        monkeypatch.setattr(
            RiotAPIClient,
            "from_settings",
            classmethod(lambda cls, settings: _client(settings, handler)),
        )
    return _install


def test_main_success(mock_riot):
    mock_riot()
    out, err = io.StringIO(), io.StringIO()
    assert entry.main([], settings=_settings(), out=out, err=err) == 0
    assert out.getvalue().splitlines() == ["Ahri", "UNKNOWN"]
    assert err.getvalue() == ""


def test_main_unknown_summoner_exits_non_zero(mock_riot):
    mock_riot()
    out, err = io.StringIO(), io.StringIO()
    assert entry.main([], settings=_settings(game_name="Ghost"), out=out, err=err) == 1
    assert out.getvalue() == ""
    assert "Ghost#NA1" in err.getvalue()


def test_main_transport_failure_prints_nothing(mock_riot):
    def _broken_matches(request):
        if request.url.path.startswith("/lol/match/v5/matches/NA1_"):
            return httpx.Response(500)
        return _riot_api(request)

    mock_riot(_broken_matches)
    out, err = io.StringIO(), io.StringIO()
    assert entry.main([], settings=_settings(), out=out, err=err) == 1
    assert out.getvalue() == ""
    assert "error:" in err.getvalue()


def test_main_missing_configuration(monkeypatch):
    def _missing_key(cls):
        raise ConfigurationError("RGAPI_KEY")

    monkeypatch.setattr(Settings, "from_env", classmethod(_missing_key))
    err = io.StringIO()
    assert entry.main([], out=io.StringIO(), err=err) == 2
    assert "RGAPI_KEY" in err.getvalue()


def test_sequential_help_describes_fetching_only():
    help_text = build_parser().format_help()
    assert "fetch matches one at a time" in help_text
    assert "listing order" not in help_text
