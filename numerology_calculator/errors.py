"""Ошибки расчета и входных данных"""
from typing import Any, Dict, Optional


class NumerologyError(Exception):
    """Базовая ошибка сервиса.

    Хранит текст ответа для клиента, машинный код и HTTP-статус,
    с которым обработчик API вернет ошибку.
    """

    code = 'NUMEROLOGY_ERROR'
    http_status = 400

    def __init__(self, message: str, http_status: Optional[int] = None,
                 extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status
        self.extra = extra or {}

    def to_response(self) -> Dict[str, Any]:
        """Тело ответа в формате webhook-платформы"""
        return {'ok': False, 'reply': self.message, **self.extra}


class MissingDateError(NumerologyError):
    """Дата рождения не передана"""
    code = 'MISSING_DOB'


class MalformedDateError(NumerologyError):
    """Дата рождения не в формате DD-MM-YYYY"""
    code = 'MALFORMED_DOB'
