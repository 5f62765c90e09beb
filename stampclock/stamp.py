import csv
import os
import sys
from enum import Enum, unique

from stampclock.timefmt import parse_clock, encode_clock


HEADER = ['kind', 'time']


class CorruptRecord(ValueError):
    pass


@unique
class Kind(Enum):
    CLOCK_IN = 'strt'
    CLOCK_OUT = 'stop'

    def __str__(self):
        return 'in' if self == Kind.CLOCK_IN else 'out'

    @classmethod
    def from_tag(cls, tag: str):
        # Any tag other than the clock-in tag counts as a clock-out
        return cls.CLOCK_IN if tag == cls.CLOCK_IN.value else cls.CLOCK_OUT


class Event:
    def __init__(self, kind: Kind, time: int):
        self.kind = kind
        self.time = time

    def encode(self):
        return [self.kind.value, encode_clock(self.time)]

    @classmethod
    def decode(cls, row: [str]):
        if len(row) != 2:
            raise CorruptRecord('Expected 2 fields, got {}'.format(len(row)))
        kind, time = row
        return cls(Kind.from_tag(kind), parse_clock(time))

    def __eq__(self, other):
        return isinstance(other, Event) and (self.kind, self.time) == (other.kind, other.time)

    def __hash__(self):
        return hash((self.kind, self.time))

    def __repr__(self):
        return 'Event({}, {})'.format(repr(self.kind), repr(self.time))


def append(file_name: str, event: Event):
    with open(file_name, 'a', newline='', encoding='utf-8') as file:
        writer = csv.writer(file, lineterminator='\n')
        if os.fstat(file.fileno()).st_size == 0:
            writer.writerow(HEADER)
        writer.writerow(event.encode())


def _rows(reader):
    # Yields (row, error) so a damaged line does not end the iteration
    while True:
        try:
            yield next(reader), None
        except StopIteration:
            return
        except csv.Error as e:
            yield None, CorruptRecord(str(e))


def read_all(file_name: str, strict: bool = True):
    events = []
    with open(file_name, 'r', newline='', encoding='utf-8') as file:
        reader = csv.reader(file)
        for row, error in _rows(reader):
            line = reader.line_num
            if error is None and (not row or (line == 1 and row == HEADER)):
                continue
            try:
                if error is not None:
                    raise error
                events.append(Event.decode(row))
            except ValueError as e:
                if strict:
                    raise type(e)('{}:{}: {}'.format(file_name, line, e)) from e
                print('{}:{}: skipping bad record ({})'.format(file_name, line, e), file=sys.stderr)
    return events
