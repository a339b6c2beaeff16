"""Извлечение и проверка даты рождения из входящих запросов"""
import re
from typing import Any, Dict, List, Optional

from .errors import MalformedDateError
from .models import DateOfBirth

# DD-MM-YYYY, DD/MM/YYYY, DD.MM.YYYY, DD MM YYYY
DOB_TEXT_PATTERN = re.compile(
    r'\b(\d{1,2})[-/. ](\d{1,2})[-/. ](\d{4})\b', re.ASCII,
)

DIGITS_PATTERN = re.compile(r'[0-9]+')

DOB_FORMAT_HINT = 'DD-MM-YYYY (e.g., 15-08-1985)'


def normalize_dob_from_text(text: Optional[str]) -> Optional[str]:
    """Находит дату в свободном тексте и приводит ее к виду DD-MM-YYYY"""
    if not text:
        return None
    match = DOB_TEXT_PATTERN.search(text)
    if not match:
        return None
    day, month, year = match.groups()
    return f'{day.zfill(2)}-{month.zfill(2)}-{year}'


def _pick_dob(container: Any) -> Any:
    if not isinstance(container, dict):
        return None
    return container.get('dob') or container.get('DOB')


def extract_function_dob(body: Dict[str, Any]) -> Any:
    """Достает dob из тела function-calling запроса.

    Поддерживаемые формы (по приоритету):
        {"dob": ...}
        {"arguments": {"dob" | "DOB": ...}}
        {"input": {"dob" | "DOB": ...}}
    Значение возвращается как есть, тип проверяет вызывающий код.
    """
    return (
        body.get('dob')
        or _pick_dob(body.get('arguments'))
        or _pick_dob(body.get('input'))
    )


def extract_webhook_dob(body: Dict[str, Any]) -> Optional[str]:
    """Достает dob из тела webhook: явное поле или дата из текста сообщения"""
    dob = body.get('dob')
    if dob and isinstance(dob, str):
        return dob
    raw_message = body.get('message') or body.get('text') or ''
    if not isinstance(raw_message, str):
        return None
    return normalize_dob_from_text(raw_message)


def split_dob(dob: str) -> List[str]:
    """Делит строку DD-MM-YYYY на части, проверяя только их количество"""
    parts = dob.split('-')
    if len(parts) != 3:
        raise MalformedDateError('DOB must be DD-MM-YYYY')
    return parts


def parse_dob(dob: str) -> DateOfBirth:
    """Проверяет строку DD-MM-YYYY и превращает ее в DateOfBirth.

    Каждая часть должна состоять из цифр и не быть нулем, а год после
    отбрасывания ведущих нулей должен иметь ровно 4 цифры.
    Диапазоны дня и месяца не проверяются.
    """
    parts = split_dob(dob)
    if not all(DIGITS_PATTERN.fullmatch(part) for part in parts):
        raise MalformedDateError(f'Invalid DOB numbers. Use {DOB_FORMAT_HINT}.')

    day, month, year = (int(part) for part in parts)
    if not day or not month or not year or len(str(year)) != 4:
        raise MalformedDateError(f'Invalid DOB numbers. Use {DOB_FORMAT_HINT}.')

    return DateOfBirth(day=day, month=month, year=year)
