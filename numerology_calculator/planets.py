"""Соответствие чисел планетам"""
from types import MappingProxyType
from typing import Mapping, Optional

# Планеты ведической нумерологии (Раху и Кету - лунные узлы)
PLANET_TABLE: Mapping[int, str] = MappingProxyType({
    1: 'Sun',
    2: 'Moon',
    3: 'Jupiter',
    4: 'Rahu',
    5: 'Mercury',
    6: 'Venus',
    7: 'Ketu',
    8: 'Saturn',
    9: 'Mars',
})


def get_planet(number: int) -> Optional[str]:
    """Возвращает планету числа или None (у нуля планеты нет)"""
    return PLANET_TABLE.get(number)
