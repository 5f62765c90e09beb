import argparse

import arrow


class ArgumentParser(argparse.ArgumentParser):
    def _parse_day(self, day: str):
        try:
            return arrow.get(day, 'YYYY-MM-DD').format('YYYY-MM-DD')
        except (ValueError, TypeError):
            self.error('Invalid day "{}". Expected a date like "2024-03-01"'.format(day))

    def _parse_time(self, time: str):
        try:
            return arrow.get(time).replace(tzinfo='local')
        except (ValueError, TypeError):
            self.error('Invalid time "{}". Try something like "2024-03-01T09:30:00"'.format(time))
