import sys
from os import path

import arrow

from stampclock import config, stamp, tablefmt, utils, workday
from stampclock.stamp import Event
from stampclock.tablefmt import Table, Align
from stampclock.timefmt import format_clock, encode_clock, seconds_of


EXIT_ERROR = 1
EXIT_NOT_STARTED = 3
EXIT_NOT_FINISHED = 4


class ArgumentParser(utils.ArgumentParser):
    def __init__(self):
        super().__init__(prog='stampclock', description='Keep track of working hours')
        self.add_argument('-c', '--config', metavar='config', type=str, default=config.DEFAULT_CONFIG_FILE)

        commands = self.add_subparsers(dest='command', metavar='command', parser_class=utils.ArgumentParser)
        commands.required = True

        stamp_cmd = commands.add_parser('stamp', help='Record a timestamp and toggle between work and break')
        stamp_cmd.add_argument('-t', '--at', type=stamp_cmd._parse_time, default=None,
                               help='Time of the stamp (default now), not earlier than the last stamp of that day')

        get_cmd = commands.add_parser('get', help='Get the work duration for the current day or DAY')
        get_cmd.add_argument('day', metavar='DAY', type=get_cmd._parse_day, nargs='?', default=None,
                             help='The day to get the work duration for, in YYYY-MM-DD')
        get_cmd.add_argument('--stamps', default=False, action='store_true', help='Show individual stamps')
        get_cmd.add_argument('--lenient', default=False, action='store_true',
                             help='Skip unreadable records instead of aborting')


def stamp_table(events: [Event], style: dict):
    table = Table([Align.RIGHT, Align.CENTER, Align.LEFT])
    table.row(['#', 'time', 'stamp'])
    table.rule()
    for i, event in enumerate(events, start=1):
        marker = style['clock-in'] if event.kind == stamp.Kind.CLOCK_IN else style['clock-out']
        table.row([i, encode_clock(event.time), '{} {}'.format(marker, event.kind)])
    table.print(style)


def do_stamp(cfg: dict, now: arrow.Arrow):
    file_name = config.resolve(cfg, now.format('YYYY-MM-DD'))

    events = stamp.read_all(file_name) if path.exists(file_name) else []
    kind = workday.decide_next_kind(workday.summarize(events))
    event = Event(kind, seconds_of(now))
    if events and event.time < events[-1].time:
        print('Stamp at {} cannot follow the stamp at {}'.format(
            encode_clock(event.time), encode_clock(events[-1].time)), file=sys.stderr)
        return EXIT_ERROR
    stamp.append(file_name, event)

    print('Updated {} with {} ({}).'.format(file_name, encode_clock(event.time), kind))
    return 0


def do_get(cfg: dict, day: str, show_stamps: bool, strict: bool):
    file_name = config.resolve(cfg, day)
    if not path.exists(file_name):
        print("Work hasn't started yet on {}.".format(day), file=sys.stderr)
        return EXIT_NOT_STARTED

    events = stamp.read_all(file_name, strict=strict)
    if show_stamps:
        stamp_table(events, tablefmt.style_named(cfg['timesheet']['style']))

    summary = workday.summarize(events)
    if summary.is_open:
        print("Work isn't finished yet on {}.".format(day), file=sys.stderr)
        return EXIT_NOT_FINISHED

    print('Worked for {} on {}.'.format(format_clock(summary.net_duration), day))
    print('From {} to {}'.format(format_clock(summary.first_clock_in), format_clock(summary.end)))
    return 0


def main(argv=None):
    parser = ArgumentParser()
    args = parser.parse_args(argv)
    now = arrow.now()

    try:
        cfg = config.load(args.config)
        if args.command == 'stamp':
            return do_stamp(cfg, args.at if args.at is not None else now)
        else:
            day = args.day if args.day is not None else now.format('YYYY-MM-DD')
            return do_get(cfg, day, args.stamps, not args.lenient)
    except (ValueError, OSError) as e:
        print('{}: error: {}'.format(parser.prog, e), file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
