"""CLI entry point: solar-tools julian|date|sun|eot|sidereal subcommands."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from solar_tools.angle import AngleUnit
from solar_tools.angle_utils import format_angle, parse_angle
from solar_tools.config import get_default_zone, get_log_level
from solar_tools.models import CivilDateTime, Direction
from solar_tools.sun import (
    apparent_datetime_from_ut,
    ecliptic_position_of_the_sun,
    equation_of_time_from_ut,
    equatorial_position_of_the_sun,
)
from solar_tools.time_utils import (
    calendar_date,
    day_of_the_week,
    gst_from_ut,
    julian_day_from_ut,
    lst_from_gst,
    modified_julian_day_from_julian_day,
    parse_datetime,
    ut_from_local,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or SOLAR_TOOLS_LOG)."""
    level = get_log_level(logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _parse_moment(text: str) -> CivilDateTime:
    """Parse --datetime into a CivilDateTime or raise ValueError."""
    moment = parse_datetime(text)
    if moment is None:
        raise ValueError(f'Invalid date/time {text!r}')
    return moment


def _write(out: TextIO, label: str, value: str) -> None:
    out.write(f'{label:<24}{value}\n')


def _julian_cmd(args: argparse.Namespace, out: TextIO) -> None:
    """Print Julian Day, MJD and weekday (julian subcommand)."""
    ut = _parse_moment(args.datetime)
    jd = julian_day_from_ut(ut)
    _write(out, 'UT', ut.iso_8601())
    _write(out, 'Julian Day', f'{jd:.6f}')
    _write(out, 'Modified Julian Day', f'{modified_julian_day_from_julian_day(jd):.6f}')
    _write(out, 'Weekday', day_of_the_week(ut.date).name.capitalize())


def _date_cmd(args: argparse.Namespace, out: TextIO) -> None:
    """Print the civil date-time of a Julian Day (date subcommand)."""
    dt = calendar_date(args.jd)
    _write(out, 'Julian Day', f'{args.jd:.6f}')
    _write(out, 'UT', f'{dt.iso_8601()} ({dt.second:.3f}s)')


def _sun_cmd(args: argparse.Namespace, out: TextIO) -> None:
    """Print the Sun's ecliptic and equatorial position (sun subcommand)."""
    ut = _parse_moment(args.datetime)
    ecliptic = ecliptic_position_of_the_sun(ut)
    equatorial = equatorial_position_of_the_sun(ut)
    _write(out, 'UT', ut.iso_8601())
    _write(out, 'Ecliptic longitude', f'{ecliptic.lng:.6f}')
    _write(out, 'Ecliptic latitude', f'{ecliptic.lat:.6f}')
    _write(out, 'Right ascension', format_angle(equatorial.asc))
    _write(out, 'Declination', format_angle(equatorial.dec))


def _eot_cmd(args: argparse.Namespace, out: TextIO) -> None:
    """Print the equation of time and apparent solar time (eot subcommand)."""
    local = _parse_moment(args.datetime)
    zone = args.zone if args.zone is not None else get_default_zone()
    logger.info('Converting local time with UTC offset %+.2f h', zone)
    ut = ut_from_local(local, zone)
    eot, overflow = equation_of_time_from_ut(ut)
    apparent = apparent_datetime_from_ut(ut)
    _write(out, 'UT', ut.iso_8601())
    _write(out, 'Equation of time', format_angle(eot))
    _write(out, 'Apparent solar time', apparent.iso_8601())
    _write(out, 'Day overflow', f'{overflow:+d}')


def _sidereal_cmd(args: argparse.Namespace, out: TextIO) -> None:
    """Print Greenwich and optionally local sidereal time (sidereal subcommand)."""
    ut = _parse_moment(args.datetime)
    gst = gst_from_ut(ut)
    _write(out, 'UT', ut.iso_8601())
    _write(out, 'GST', format_angle(gst))
    if args.longitude is not None:
        longitude = parse_angle(args.longitude, AngleUnit.DEGREES)
        if longitude is None:
            raise ValueError(f'Invalid longitude {args.longitude!r}')
        lst = lst_from_gst(gst, longitude.to_decimal(), Direction(args.lon_dir))
        _write(out, 'LST', format_angle(lst))


def main() -> int:
    """Entry point for solar-tools CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='solar-tools',
        description='Julian Day, equation of time, and position of the Sun.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    subparsers = parser.add_subparsers(dest='command', required=True)

    julian_parser = subparsers.add_parser('julian', help='Julian Day of a UT date/time')
    julian_parser.add_argument('--datetime', type=str, required=True, help='UT date/time')
    julian_parser.set_defaults(func=_julian_cmd)

    date_parser = subparsers.add_parser('date', help='Civil date/time of a Julian Day')
    date_parser.add_argument('--jd', type=float, required=True, help='Julian Day')
    date_parser.set_defaults(func=_date_cmd)

    sun_parser = subparsers.add_parser('sun', help="Sun's ecliptic and equatorial position")
    sun_parser.add_argument('--datetime', type=str, required=True, help='UT date/time')
    sun_parser.set_defaults(func=_sun_cmd)

    eot_parser = subparsers.add_parser('eot', help='Equation of time and apparent solar time')
    eot_parser.add_argument('--datetime', type=str, required=True, help='Local date/time')
    eot_parser.add_argument(
        '--zone',
        type=float,
        default=None,
        help='UTC offset in hours, east positive; env: SOLAR_TOOLS_ZONE',
    )
    eot_parser.set_defaults(func=_eot_cmd)

    sidereal_parser = subparsers.add_parser('sidereal', help='Greenwich and local sidereal time')
    sidereal_parser.add_argument('--datetime', type=str, required=True, help='UT date/time')
    sidereal_parser.add_argument(
        '--longitude', type=str, default=None, help='Longitude as "d m s" (e.g. "64 0 0")'
    )
    sidereal_parser.add_argument(
        '--lon-dir', type=str, default='east', choices=['east', 'west'], help='Longitude direction'
    )
    sidereal_parser.set_defaults(func=_sidereal_cmd)

    args = parser.parse_args()
    _configure_logging(args.verbose)
    try:
        args.func(args, sys.stdout)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
