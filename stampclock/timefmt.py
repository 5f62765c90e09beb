import re

from arrow import Arrow


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60

INTEGER_RE = re.compile(r'[+-]?[0-9]+')


class MalformedTime(ValueError):
    pass


def _div(a: int, b: int):
    # Division and remainder truncating toward zero
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def parse_clock(hhmmss: str):
    parts = hhmmss.split(':')
    if len(parts) != 3 or not all(INTEGER_RE.fullmatch(p) for p in parts):
        raise MalformedTime('Invalid time "{}", expected HH:MM:SS'.format(hhmmss))
    h, m, s = (int(p) for p in parts)
    return h * SECONDS_PER_HOUR + m * SECONDS_PER_MINUTE + s


def format_clock(seconds: int):
    hours, rest = _div(seconds, SECONDS_PER_HOUR)
    minutes, _ = _div(rest, SECONDS_PER_MINUTE)
    return '{:02d}:{:02d}'.format(hours, minutes)


def encode_clock(seconds: int):
    hours, rest = divmod(seconds, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, SECONDS_PER_MINUTE)
    return '{:02d}:{:02d}:{:02d}'.format(hours, minutes, secs)


def seconds_of(time: Arrow):
    return time.hour * SECONDS_PER_HOUR + time.minute * SECONDS_PER_MINUTE + time.second
