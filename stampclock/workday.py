from stampclock.stamp import Event, Kind


# Net duration is only the time worked while stamps alternate, starting with a clock-in
class DaySummary:
    def __init__(self, first_clock_in: int = 0, net_duration: int = 0):
        self.first_clock_in = first_clock_in
        self.net_duration = net_duration

    @property
    def is_open(self):
        return self.net_duration < 0

    @property
    def end(self):
        return self.first_clock_in + self.net_duration

    def __eq__(self, other):
        return (isinstance(other, DaySummary)
                and (self.first_clock_in, self.net_duration) == (other.first_clock_in, other.net_duration))

    def __repr__(self):
        return 'DaySummary({}, {})'.format(self.first_clock_in, self.net_duration)


def summarize(events: [Event]):
    clock_ins = [e.time for e in events if e.kind == Kind.CLOCK_IN]
    clock_outs = [e.time for e in events if e.kind == Kind.CLOCK_OUT]

    first_clock_in = clock_ins[0] if clock_ins else 0
    return DaySummary(first_clock_in, sum(clock_outs) - sum(clock_ins))


def decide_next_kind(summary: DaySummary):
    # Toggle on the running net duration, not on the kind of the last stamp
    if summary.net_duration < 0:
        return Kind.CLOCK_OUT
    return Kind.CLOCK_IN
