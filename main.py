#!/usr/bin/env python3
from logging.config import dictConfig
from typing import List, Union
import argparse
import json
import logging
import os

from clever_roster import CleverClient, exceptions

RECORD_KINDS = ('students', 'teachers', 'courses', 'sections', 'classrooms',
                'enrollments')


def setup_logging(config_file: str = None, log_dir: str = None,
                  log_level: Union[str, int] = None) -> dict:
    if config_file is None:
        config_file = os.path.join(os.getcwd(), 'logging_config.json')

    if log_level is None:
        log_level = os.environ.get('LOGLEVEL', logging.INFO)

    with open(config_file, 'r') as f:
        config = json.load(f)

    for obj_type in 'loggers', 'handlers':
        obj: dict
        for obj in config[obj_type].values():
            if obj['level'] in ('NOTSET', logging.NOTSET):
                # Use environment variable if level is not set
                obj['level'] = log_level
            if (obj_type == 'handlers'
                    and log_dir is not None
                    and 'filename' in obj.keys()):
                obj['filename'] = os.path.join(log_dir, obj['filename'])

    return config


def parse_args(args: List[str] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Dumps the Clever roster of a district as JSON.'
    )
    parser.add_argument('kinds', nargs='*', metavar='KIND',
                        help='which records to dump, all by default: '
                             + ', '.join(RECORD_KINDS))
    parser.add_argument('-o', '--output', default='clever_roster.json',
                        help='where to write the roster')
    parser.add_argument('--log-config', default=os.environ.get('LOG_CONFIG'),
                        help='logging configuration file')
    parsed = parser.parse_args(args)
    unknown = set(parsed.kinds) - set(RECORD_KINDS)
    if unknown:
        parser.error('unknown record kinds: ' + ', '.join(sorted(unknown)))
    if not parsed.kinds:
        parsed.kinds = list(RECORD_KINDS)
    return parsed


def dump_roster(client: CleverClient, kinds: List[str]) -> dict:
    """Fetches each of `kinds` and serializes the records."""
    roster = {}
    for kind in kinds:
        records = getattr(client, kind)()
        if isinstance(records, dict):
            roster[kind] = {role: [r.to_dict() for r in role_records]
                            for role, role_records in records.items()}
        else:
            roster[kind] = [r.to_dict() for r in records]
    return roster


def main():
    args = parse_args()
    logging_config = setup_logging(config_file=args.log_config,
                                   log_dir=os.environ.get('LOGDIR'))
    dictConfig(logging_config)

    logger = logging.getLogger(__name__)
    client = CleverClient.from_environment()
    try:
        roster = dump_roster(client, args.kinds)
    except exceptions.CleverError:
        logger.exception('Could not fetch roster.')
        return
    finally:
        client.connection.close()

    with open(args.output, 'w') as f:
        json.dump(roster, f, indent=2)
    logger.info(f'Wrote {", ".join(args.kinds)} to {args.output}.')


if __name__ == '__main__':
    main()
