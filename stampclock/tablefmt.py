import sys
from enum import IntEnum


ASCII_STYLE = {
    'top': ('.', '-', '-', '.'),
    'rule': ('|', '-', '+', '|'),
    'bottom': ("'", '-', '-', "'"),
    'vertical': '|',
    'clock-in': '>>',
    'clock-out': '::',
}


BOX_STYLE = {
    'top': ('┌', '─', '┬', '┐'),
    'rule': ('├', '─', '┼', '┤'),
    'bottom': ('└', '─', '┴', '┘'),
    'vertical': '│',
    'clock-in': '▶',
    'clock-out': '⏸',
}


def style_named(name: str):
    return ASCII_STYLE if name == 'ascii' else BOX_STYLE


class Align(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


def pad(s: str, width: int, align: Align):
    padding = width - len(s)
    if padding <= 0:
        return s
    if align == Align.LEFT:
        return s + ' ' * padding
    elif align == Align.RIGHT:
        return ' ' * padding + s
    left_pad = padding // 2
    return ' ' * left_pad + s + ' ' * (padding - left_pad)


class Table:
    RULE = None

    def __init__(self, aligns: [Align]):
        self.aligns = aligns
        self.rows = []

    def row(self, cells: list):
        self.rows.append([str(v) for v in cells])

    def rule(self):
        self.rows.append(Table.RULE)

    def widths(self):
        widths = [0] * len(self.aligns)
        for row in self.rows:
            if row is not Table.RULE:
                widths = [max(w, len(c)) for w, c in zip(widths, row)]
        return widths

    def print(self, style: dict, file=sys.stdout):
        widths = self.widths()

        def rule(left, dash, join, right):
            print(dash.join([left, (dash + join + dash).join(w * dash for w in widths), right]), file=file)

        vertical = style['vertical']
        rule(*style['top'])
        for row in self.rows:
            if row is Table.RULE:
                rule(*style['rule'])
            else:
                cells = (pad(c, w, a) for c, w, a in zip(row, widths, self.aligns))
                print(vertical, (' ' + vertical + ' ').join(cells), vertical, file=file)
        rule(*style['bottom'])
