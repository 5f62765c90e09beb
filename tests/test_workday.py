from stampclock.stamp import Event, Kind
from stampclock.workday import DaySummary, summarize, decide_next_kind


def clock_in(seconds):
    return Event(Kind.CLOCK_IN, seconds)


def clock_out(seconds):
    return Event(Kind.CLOCK_OUT, seconds)


def test_empty_day():
    summary = summarize([])
    assert summary == DaySummary(0, 0)
    assert not summary.is_open


def test_open_day():
    summary = summarize([clock_in(32400)])
    assert summary.net_duration == -32400
    assert summary.first_clock_in == 32400
    assert summary.is_open


def test_closed_day():
    summary = summarize([clock_in(32400), clock_out(61200)])
    assert summary.net_duration == 28800
    assert summary.first_clock_in == 32400
    assert not summary.is_open
    assert summary.end == 61200


def test_break_is_subtracted():
    summary = summarize([clock_in(32400), clock_out(43200), clock_in(46800), clock_out(61200)])
    assert summary.net_duration == 7 * 3600
    assert summary.first_clock_in == 32400
    assert not summary.is_open


def test_first_clock_in_ignores_leading_clock_out():
    summary = summarize([clock_out(30000), clock_in(32400)])
    assert summary.first_clock_in == 32400
    assert summary.net_duration == 30000 - 32400


def test_unbalanced_stamps_use_sums():
    # Two clock-outs after one clock-in still produce a positive net duration
    summary = summarize([clock_in(32400), clock_out(36000), clock_out(39600)])
    assert summary.net_duration == 36000 + 39600 - 32400
    assert not summary.is_open


def test_decide_next_kind():
    assert decide_next_kind(DaySummary()) == Kind.CLOCK_IN
    assert decide_next_kind(DaySummary(32400, -32400)) == Kind.CLOCK_OUT
    assert decide_next_kind(DaySummary(32400, 28800)) == Kind.CLOCK_IN


def test_stamps_alternate():
    events = []
    kinds = []
    for seconds in (32400, 43200, 46800, 61200):
        kind = decide_next_kind(summarize(events))
        kinds.append(kind)
        events.append(Event(kind, seconds))

    assert kinds == [Kind.CLOCK_IN, Kind.CLOCK_OUT, Kind.CLOCK_IN, Kind.CLOCK_OUT]


def test_toggle_follows_net_duration_not_last_kind():
    # Midnight clock-in contributes nothing, so the day does not count as open
    events = [clock_in(0)]
    assert decide_next_kind(summarize(events)) == Kind.CLOCK_IN
