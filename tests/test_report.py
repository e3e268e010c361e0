from datetime import datetime, timedelta, timezone

from application.services.pipeline import chronological, distinct_champions, render_lines
from domain.entities import Champion, LossResult
from domain.enums import OutputMode

BASE = datetime(2024, 4, 10, 12, 0, tzinfo=timezone.utc)

A = Champion(103, "Ahri")
B = Champion(1, "Annie")
C = Champion(84, "Akali")
NAMELESS = Champion(9999)


def _loss(champion, match_id, hours=0):
    return LossResult(champion=champion, date=BASE + timedelta(hours=hours), match_id=match_id)


def test_distinct_champions_keeps_first_loss_order():
    losses = [_loss(A, "m1"), _loss(B, "m2"), _loss(A, "m3"), _loss(C, "m4")]
    assert distinct_champions(losses) == [A, B, C]


def test_champion_identity_ignores_display_name():
    assert Champion(103, "Ahri") == Champion(103, None)
    assert distinct_champions([_loss(Champion(103, "Ahri"), "m1"), _loss(Champion(103), "m2")]) == [A]


def test_chronological_sorts_by_date():
    losses = [_loss(A, "m3", 2), _loss(B, "m1", 0), _loss(C, "m2", 1)]
    assert [l.match_id for l in chronological(losses)] == ["m1", "m2", "m3"]


def test_render_champions_mode_uses_placeholder():
    losses = [_loss(A, "m1", 0), _loss(NAMELESS, "m2", 1), _loss(A, "m3", 2)]
    assert list(render_lines(losses, OutputMode.CHAMPIONS)) == ["Ahri", "UNKNOWN"]


def test_render_losses_mode_one_line_per_loss():
    losses = [_loss(A, "m2", 1), _loss(A, "m1", 0)]
    lines = list(render_lines(losses, OutputMode.LOSSES))
    assert len(lines) == 2
    name, date, match_id = lines[0].split("\t")
    assert (name, match_id) == ("Ahri", "m1")
    assert date == BASE.astimezone().strftime("%Y-%m-%d %H:%M")


def test_render_empty():
    assert list(render_lines([], OutputMode.CHAMPIONS)) == []
    assert list(render_lines([], OutputMode.LOSSES)) == []


def test_champions_mode_follows_first_loss_date_not_listing_order():
    # match-v5 lists newest first
    listing = [_loss(C, "m3", 2), _loss(B, "m2", 1), _loss(A, "m1", 0), _loss(C, "m0", -1)]
    assert list(render_lines(listing, OutputMode.CHAMPIONS)) == ["Akali", "Ahri", "Annie"]
