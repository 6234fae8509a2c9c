#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit Converter
- Convert a value between units of one category: length, temperature, volume, time
- Every unit maps to its category's base unit (Meters, Celsius, Milliliters, Seconds);
  a conversion is always input -> base -> output
- CLI one-shot conversion, session-driven REPL and a small Tkinter form
- Strict by default: unknown units/categories and unparseable values raise;
  --lenient restores the pass-through / zero fallbacks

Usage:
    python unit_converter.py --category Temperature --from Celsius --to Fahrenheit --value 100
    python unit_converter.py --list
    python unit_converter.py --list Length
    python unit_converter.py --repl
    python unit_converter.py --gui
"""
from __future__ import annotations
import argparse
import logging
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple, Optional, List, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# -------- Errors --------

class ConversionError(ValueError):
    """Base class for all conversion errors."""


class ParseError(ConversionError):
    """Raw input is not a finite number."""
    def __init__(self, raw: str):
        super().__init__(f"Not a number: {raw!r}")
        self.raw = raw


class UnknownUnitError(ConversionError):
    """Unit does not belong to the category's unit set."""
    def __init__(self, category: "Category", unit: str):
        super().__init__(
            f"Unknown {category.value} unit: {unit!r} "
            f"(expected one of: {', '.join(list_units(category))})"
        )
        self.category = category
        self.unit = unit


class UnknownCategoryError(ConversionError):
    """Name is not one of the fixed categories."""
    def __init__(self, name: str):
        super().__init__(
            f"Unknown category: {name!r} "
            f"(expected one of: {', '.join(c.value for c in Category)})"
        )
        self.name = name

# -------- Conversion Engine --------

class Category(str, Enum):
    LENGTH = "Length"
    TEMPERATURE = "Temperature"
    VOLUME = "Volume"
    TIME = "Time"


@dataclass(frozen=True)
class Unit:
    name: str
    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


@dataclass(frozen=True)
class UnitTable:
    category: Category
    base: str
    units: Tuple[Unit, ...]

    def names(self) -> List[str]:
        return [u.name for u in self.units]

    def get(self, name: str) -> Optional[Unit]:
        key = name.strip().lower()
        for u in self.units:
            if u.name.lower() == key:
                return u
        return None


def linear(name: str, factor: float) -> Unit:
    # value_in_base = value * factor
    return Unit(name, lambda x, f=factor: x * f, lambda x, f=factor: x / f)


def linear_table(category: Category, pairs: List[Tuple[str, float]]) -> UnitTable:
    """First pair is the base unit (factor 1)."""
    return UnitTable(category, pairs[0][0], tuple(linear(n, f) for n, f in pairs))


UNIT_TABLES: Dict[Category, UnitTable] = {
    # Length (base: meter)
    Category.LENGTH: linear_table(Category.LENGTH, [
        ('Meters', 1.0),
        ('Kilometers', 1000.0),
        ('Feet', 0.3048),
        ('Yards', 0.9144),
        ('Miles', 1609.34),
    ]),
    # Temperature (affine; base: Celsius)
    Category.TEMPERATURE: UnitTable(Category.TEMPERATURE, 'Celsius', (
        Unit('Celsius', lambda x: x, lambda x: x),
        Unit('Fahrenheit', lambda x: (x - 32.0) * 5.0 / 9.0, lambda x: x * 9.0 / 5.0 + 32.0),
        Unit('Kelvin', lambda x: x - 273.15, lambda x: x + 273.15),
    )),
    # Volume (base: milliliter)
    Category.VOLUME: linear_table(Category.VOLUME, [
        ('Milliliters', 1.0),
        ('Liters', 1000.0),
        ('Cups', 240.0),
        ('Pints', 473.176),
        ('Gallons', 3785.41),
    ]),
    # Time (base: second)
    Category.TIME: linear_table(Category.TIME, [
        ('Seconds', 1.0),
        ('Minutes', 60.0),
        ('Hours', 3600.0),
        ('Days', 86400.0),
    ]),
}


def get_category(name: Union[Category, str]) -> Category:
    if isinstance(name, Category):
        return name
    key = str(name).strip().lower()
    for c in Category:
        if c.value.lower() == key or c.name.lower() == key:
            return c
    raise UnknownCategoryError(str(name))


def list_categories() -> List[Category]:
    return list(Category)


def list_units(category: Union[Category, str]) -> List[str]:
    return UNIT_TABLES[get_category(category)].names()


def _lookup(table: UnitTable, name: str, strict: bool) -> Optional[Unit]:
    unit = table.get(name)
    if unit is None:
        if strict:
            raise UnknownUnitError(table.category, name)
        logger.warning("Unknown %s unit %r; treating value as %s",
                       table.category.value, name, table.base)
    return unit


def convert(category: Union[Category, str], input_unit: str, output_unit: str,
            value: float, strict: bool = True) -> float:
    """
    Convert `value` from `input_unit` to `output_unit` within `category`.

    The value is routed through the category's base unit. With strict=False an
    unknown unit name is treated as the base unit instead of raising.
    """
    table = UNIT_TABLES[get_category(category)]
    src = _lookup(table, input_unit, strict)
    dst = _lookup(table, output_unit, strict)
    x_base = src.to_base(value) if src else value
    y = dst.from_base(x_base) if dst else x_base
    logger.debug("%s: %r %s -> %r %s = %r %s", table.category.value,
                 value, input_unit, x_base, table.base, y, output_unit)
    return y


def parse_value(raw: str, strict: bool = True) -> float:
    """Parse user-entered text; lenient mode coerces junk to 0.0."""
    text = (raw or "").strip()
    try:
        value = float(text)
        if not math.isfinite(value):
            raise ValueError(text)
        return value
    except ValueError:
        if strict:
            raise ParseError(raw) from None
        logger.warning("Could not parse %r as a number; using 0", raw)
        return 0.0


def format_result(value: float, precision: int = 15) -> str:
    out = f"{value:.{precision}g}"
    return "0" if out == "-0" else out

# -------- Settings --------

class ConverterSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UNIT_CONVERTER_")

    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    PRECISION: int = Field(
        default=15, ge=1, le=17,
        description="Significant digits used when printing a result"
    )
    STRICT: bool = Field(
        default=True,
        description="Reject unknown units and unparseable values instead of falling back"
    )
    DEFAULT_CATEGORY: Category = Field(
        default=Category.LENGTH,
        description="Category selected when a session starts"
    )

    @field_validator("DEFAULT_CATEGORY", mode="before")
    @classmethod
    def known_category(cls, v):
        # Accepts any case; UnknownCategoryError is a ValueError
        return get_category(v)


def setup_logging(level: str = "WARNING") -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    # Results go to stdout; keep it clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

# -------- Session --------

@dataclass(frozen=True)
class ConversionRequest:
    category: Category
    input_unit: str
    output_unit: str
    raw_value: str


class ConversionSession:
    """
    Caller-owned selection state behind a single-screen form.

    input_unit/output_unit are always members of the current category's units;
    changing category resets them to the first/last unit and clears the value.
    """

    def __init__(self, category: Union[Category, str] = Category.LENGTH, strict: bool = True):
        self.strict = strict
        self.category = get_category(category)
        self.input_unit = ""
        self.output_unit = ""
        self.raw_value = ""
        self._reset_units()

    @property
    def units(self) -> List[str]:
        return list_units(self.category)

    def _reset_units(self):
        units = self.units
        self.input_unit = units[0]
        self.output_unit = units[-1]
        self.raw_value = ""

    def set_category(self, category: Union[Category, str]):
        self.category = get_category(category)
        self._reset_units()
        logger.debug("Category set to %s (%s -> %s)",
                     self.category.value, self.input_unit, self.output_unit)

    def _canonical(self, name: str) -> str:
        unit = UNIT_TABLES[self.category].get(name)
        if unit is None:
            raise UnknownUnitError(self.category, name)
        return unit.name

    def set_input_unit(self, name: str):
        self.input_unit = self._canonical(name)

    def set_output_unit(self, name: str):
        self.output_unit = self._canonical(name)

    def set_value(self, raw: str):
        self.raw_value = raw

    def swap_units(self):
        self.input_unit, self.output_unit = self.output_unit, self.input_unit

    def request(self) -> ConversionRequest:
        return ConversionRequest(self.category, self.input_unit, self.output_unit, self.raw_value)

    def result(self) -> float:
        # Nothing typed yet reads as 0, like an empty form
        if not self.raw_value.strip():
            value = 0.0
        else:
            value = parse_value(self.raw_value, strict=self.strict)
        return convert(self.category, self.input_unit, self.output_unit, value, strict=self.strict)

# -------- CLI / REPL --------

def cmd_list(category: Optional[str] = None):
    if category:
        for u in list_units(category):
            print(u)
    else:
        for c in list_categories():
            print(c.value)


REPL_HELP = """Unit Converter REPL
Commands:
  <value>                 - convert using the current selection
  :list                   - list categories
  :list <category>        - list units
  :category <name>        - switch category (resets units and value)
  :from <unit> / :to <unit>
  :swap                   - swap from/to units
  :show                   - show current selection
  :quit / :q / :exit      - exit"""


def cmd_repl(session: ConversionSession, precision: int = 15):
    print(REPL_HELP)

    def show():
        print(f"[{session.category.value}] {session.input_unit} -> {session.output_unit}")

    show()
    while True:
        try:
            s = input("» ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not s:
            continue
        if s in (':quit', ':q', ':exit'):
            break
        cmd, _, arg = s.partition(' ')
        arg = arg.strip()
        try:
            if cmd == ':list':
                cmd_list(arg or None)
            elif cmd == ':category':
                session.set_category(arg)
                show()
            elif cmd == ':from':
                session.set_input_unit(arg)
                show()
            elif cmd == ':to':
                session.set_output_unit(arg)
                show()
            elif cmd == ':swap':
                session.swap_units()
                show()
            elif cmd == ':show':
                show()
            elif cmd.startswith(':'):
                print(f"Error: unknown command {cmd}")
            else:
                session.set_value(s)
                y = session.result()
                print(f"{s} {session.input_unit} = {format_result(y, precision)} {session.output_unit}")
        except ConversionError as e:
            print(f"Error: {e}")

# -------- Main --------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="unit-converter", description="Unit Converter")
    p.add_argument('--category', help='Length, Temperature, Volume or Time')
    p.add_argument('--from', dest='from_unit', help='Input unit, e.g. Celsius')
    p.add_argument('--to', dest='to_unit', help='Output unit, e.g. Fahrenheit')
    p.add_argument('--value', help='Numeric value to convert')
    p.add_argument('--list', nargs='?', const=True, help='List categories or units for a category')
    p.add_argument('--repl', action='store_true', help='Run interactive REPL')
    p.add_argument('--gui', action='store_true', help='Launch GUI')
    p.add_argument('--precision', type=int, help='Significant digits in printed results')
    p.add_argument('--lenient', action='store_true',
                   help='Treat unknown units as the base unit and unparseable values as 0')
    p.add_argument('--log-level', help='DEBUG, INFO, WARNING, ERROR or CRITICAL')
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    try:
        settings = ConverterSettings()
    except ValidationError as e:
        p.error(f"invalid UNIT_CONVERTER_* setting: {e}")

    conversion = (args.category, args.from_unit, args.to_unit, args.value)
    if any(a is not None for a in conversion) and not all(a is not None for a in conversion):
        p.error("--category, --from, --to and --value must be given together")
    precision = args.precision if args.precision is not None else settings.PRECISION
    if not 1 <= precision <= 17:
        p.error("--precision must be between 1 and 17")
    strict = settings.STRICT and not args.lenient

    try:
        setup_logging(args.log_level or settings.LOG_LEVEL)
    except ValueError as e:
        p.error(str(e))

    try:
        if args.list is not None:
            cmd_list(None if args.list is True else args.list)
            return 0
        if args.repl:
            cmd_repl(ConversionSession(settings.DEFAULT_CATEGORY, strict=strict), precision)
            return 0
        if args.gui:
            # Run as a script this module is __main__; build the session from the
            # copy the GUI imports so its error classes match
            import unit_converter_gui
            session = unit_converter_gui.ConversionSession(settings.DEFAULT_CATEGORY.value, strict=strict)
            unit_converter_gui.launch_gui(session, precision)
            return 0
        if args.category is not None:
            value = parse_value(args.value, strict=strict)
            y = convert(args.category, args.from_unit, args.to_unit, value, strict=strict)
            print(format_result(y, precision))
            return 0
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    p.print_help()
    return 0

if __name__ == '__main__':
    sys.exit(main())
