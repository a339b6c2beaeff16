"""Модели данных для нумерологического расчета"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class DateOfBirth(BaseModel):
    """Дата рождения, разобранная на день, месяц и год.

    Календарная корректность не проверяется: 31-02-1990 допустима.
    """
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1)
    month: int = Field(ge=1)
    year: int = Field(ge=1000, le=9999)


class NumerologyResult(BaseModel):
    """Результат расчета"""
    basic_number: int
    basic_planet: Optional[str] = None    # None, если число свелось к 0
    destiny_number: int
    destiny_planet: Optional[str] = None
    grid: Dict[int, int]                  # цифра 1-9 -> количество
