"""Калькулятор базового числа, числа судьбы и сетки"""
from typing import Dict, List, Optional, Tuple, Union

from .dob_parser import parse_dob
from .models import DateOfBirth, NumerologyResult
from .planets import get_planet


def _non_zero_digits(*chunks: str) -> List[int]:
    """Цифры из строк без нулей"""
    return [int(char) for chunk in chunks for char in chunk if char != '0']


class NumerologyCalculator:
    """Класс для нумерологического расчета по дате рождения.

    Состояния не хранит, один экземпляр можно вызывать из разных потоков.
    """

    GRID_DIGITS = range(1, 10)

    def reduce_number(self, number: int) -> int:
        """Редуцирует число до однозначного (0-9) повторным сложением цифр"""
        if number < 0:
            raise ValueError(f'Cannot reduce negative number: {number}')
        while number > 9:
            number = sum(_non_zero_digits(str(number)))
        return number

    def calculate_basic(self, dob: DateOfBirth) -> Tuple[int, Optional[str]]:
        """Базовое число: сумма цифр дня рождения"""
        basic_number = self.reduce_number(dob.day)
        return basic_number, get_planet(basic_number)

    def calculate_destiny(self, dob: DateOfBirth) -> Tuple[int, Optional[str]]:
        """Число судьбы: сумма всех ненулевых цифр дня, месяца и полного года"""
        digits = _non_zero_digits(str(dob.day), str(dob.month), str(dob.year))
        destiny_number = self.reduce_number(sum(digits))
        return destiny_number, get_planet(destiny_number)

    def build_grid(self, dob: DateOfBirth, destiny_number: int) -> Dict[int, int]:
        """Сетка: сколько раз встречается каждая цифра 1-9.

        В отличие от числа судьбы, от года берутся только две последние цифры.
        Число судьбы добавляется в конец всегда, даже если оно равно 0.
        """
        digits = _non_zero_digits(str(dob.day), str(dob.month), str(dob.year)[-2:])
        digits.append(destiny_number)
        return {digit: digits.count(digit) for digit in self.GRID_DIGITS}

    def calculate(self, dob: Union[DateOfBirth, str]) -> NumerologyResult:
        """Основной метод расчета"""
        if isinstance(dob, str):
            dob = parse_dob(dob)

        basic_number, basic_planet = self.calculate_basic(dob)
        destiny_number, destiny_planet = self.calculate_destiny(dob)
        grid = self.build_grid(dob, destiny_number)

        return NumerologyResult(
            basic_number=basic_number,
            basic_planet=basic_planet,
            destiny_number=destiny_number,
            destiny_planet=destiny_planet,
            grid=grid,
        )


_calculator = NumerologyCalculator()


def calc_from_dob(dob: Union[DateOfBirth, str]) -> NumerologyResult:
    """Расчет по дате рождения (DateOfBirth или строка DD-MM-YYYY)"""
    return _calculator.calculate(dob)
