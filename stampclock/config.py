import toml
import appdirs
import os
from os import path


DEFAULT_CONFIG = {
    'stamps': {
        'dir': appdirs.user_data_dir('stampclock'),
    },
    'timesheet': {
        'style': 'box',
    },
}

DEFAULT_CONFIG_FILE = path.join(appdirs.user_config_dir('stampclock'), 'config.toml')


def load(file_name: str):
    cfg = {section: values.copy() for section, values in DEFAULT_CONFIG.items()}
    try:
        for section, values in toml.load(file_name).items():
            cfg.setdefault(section, {}).update(values)
    except FileNotFoundError:
        os.makedirs(path.dirname(file_name) or '.', exist_ok=True)
        with open(file_name, 'w') as f:
            toml.dump(cfg, f)

    return cfg


def resolve(cfg: dict, date: str):
    stamp_dir = path.expanduser(cfg['stamps']['dir'])
    os.makedirs(stamp_dir, exist_ok=True)
    return path.join(stamp_dir, '{}.csv'.format(date))
