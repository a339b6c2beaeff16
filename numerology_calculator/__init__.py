"""Модуль нумерологического расчета по дате рождения"""
from .calculator import NumerologyCalculator, calc_from_dob
from .dob_parser import (
    extract_function_dob,
    extract_webhook_dob,
    normalize_dob_from_text,
    parse_dob,
)
from .errors import MalformedDateError, MissingDateError, NumerologyError
from .models import DateOfBirth, NumerologyResult
from .planets import PLANET_TABLE, get_planet

__all__ = [
    'NumerologyCalculator',
    'calc_from_dob',
    'extract_function_dob',
    'extract_webhook_dob',
    'normalize_dob_from_text',
    'parse_dob',
    'MalformedDateError',
    'MissingDateError',
    'NumerologyError',
    'DateOfBirth',
    'NumerologyResult',
    'PLANET_TABLE',
    'get_planet',
]
