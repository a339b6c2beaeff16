"""Генератор ответов и отчетов по результату расчета"""
import io
import json
import logging
import os
from typing import Dict, List, Optional

from PIL import Image, ImageDraw, ImageFont

from numerology_calculator.models import NumerologyResult

logger = logging.getLogger(__name__)

# Раскладка сетки Ло Шу: строки сверху вниз
LO_SHU_LAYOUT: List[List[int]] = [
    [4, 9, 2],
    [3, 5, 7],
    [8, 1, 6],
]

NO_PLANET = 'no planet'

FONT_PATHS = [
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "C:/Windows/Fonts/arial.ttf",  # Windows
]


def _planet_label(planet: Optional[str]) -> str:
    return planet if planet is not None else NO_PLANET


def grid_to_json(grid: Dict[int, int]) -> str:
    """Сетка в компактном JSON: {"1":2,"2":0,...}"""
    return json.dumps({str(digit): count for digit, count in grid.items()},
                      separators=(',', ':'))


def grid_cell(digit: int, count: int) -> str:
    """Содержимое ячейки: цифра, повторенная count раз, или прочерк"""
    return str(digit) * count if count else '-'


class ReportGenerator:
    """Генератор текстовых и визуальных отчетов"""

    def generate_reply(self, dob: str, result: NumerologyResult) -> str:
        """Короткий ответ для чат-платформы"""
        return (
            f"DOB: {dob}\n"
            f"Basic Number: {result.basic_number} ({_planet_label(result.basic_planet)})\n"
            f"Destiny Number: {result.destiny_number} ({_planet_label(result.destiny_planet)})\n"
            f"Grid: {grid_to_json(result.grid)}"
        )

    def missing_numbers(self, result: NumerologyResult) -> List[int]:
        """Цифры, которых нет в сетке"""
        return [digit for digit, count in sorted(result.grid.items()) if count == 0]

    def generate_grid_chart(self, result: NumerologyResult) -> str:
        """Сетка Ло Шу в виде текстовой таблицы 3x3"""
        width = max(len(grid_cell(d, result.grid.get(d, 0))) for row in LO_SHU_LAYOUT for d in row)
        lines = []
        for row in LO_SHU_LAYOUT:
            cells = [grid_cell(d, result.grid.get(d, 0)).center(width) for d in row]
            lines.append(' | '.join(cells))
        separator = '\n' + '-+-'.join(['-' * width] * 3) + '\n'
        return separator.join(lines)

    def generate_text_report(self, dob: str, result: NumerologyResult) -> str:
        """Генерирует текстовый отчет"""
        missing = self.missing_numbers(result)
        report = f"""NUMEROLOGY REPORT
========================================

DOB: {dob}

Basic Number:   {result.basic_number} ({_planet_label(result.basic_planet)})
Destiny Number: {result.destiny_number} ({_planet_label(result.destiny_planet)})

----------------------------------------

GRID:

{self.generate_grid_chart(result)}

Missing numbers: {', '.join(map(str, missing)) if missing else 'none'}
"""
        return report

    def _load_font(self, size: int):
        """Ищет системный шрифт, иначе берет встроенный"""
        for path in FONT_PATHS:
            if os.path.exists(path):
                try:
                    return ImageFont.truetype(path, size)
                except OSError as e:
                    logger.warning(f"Не удалось загрузить шрифт {path}: {e}")
        return ImageFont.load_default()

    def generate_visual_grid(self, result: NumerologyResult) -> bytes:
        """Генерирует PNG с сеткой Ло Шу"""
        img_size = 600
        label_height = 40
        cell_size = img_size // 3
        border_width = 3

        border_color = (0, 0, 0)
        destiny_color = (255, 215, 0)  # Золотой для числа судьбы

        img = Image.new('RGB', (img_size, img_size + label_height), color='white')
        draw = ImageDraw.Draw(img)

        for i in range(4):
            offset = min(i * cell_size, img_size - border_width)
            draw.rectangle([offset, 0, offset + border_width, img_size], fill=border_color)
            draw.rectangle([0, offset, img_size, offset + border_width], fill=border_color)

        font = self._load_font(48)
        for row_index, row in enumerate(LO_SHU_LAYOUT):
            for col_index, digit in enumerate(row):
                left = col_index * cell_size
                top = row_index * cell_size

                # Выделяем ячейку числа судьбы
                if digit == result.destiny_number:
                    margin = 10
                    draw.rectangle(
                        [left + margin, top + margin,
                         left + cell_size - margin, top + cell_size - margin],
                        fill=destiny_color, outline=border_color, width=2
                    )

                text = grid_cell(digit, result.grid.get(digit, 0))
                bbox = draw.textbbox((0, 0), text, font=font)
                text_width = bbox[2] - bbox[0]
                text_height = bbox[3] - bbox[1]
                draw.text(
                    (left + (cell_size - text_width) // 2, top + (cell_size - text_height) // 2),
                    text,
                    fill=(0, 0, 0),
                    font=font
                )

        label_font = self._load_font(20)
        label_text = (
            f"Basic {result.basic_number} ({_planet_label(result.basic_planet)})  "
            f"Destiny {result.destiny_number} ({_planet_label(result.destiny_planet)})"
        )
        bbox = draw.textbbox((0, 0), label_text, font=label_font)
        text_width = bbox[2] - bbox[0]
        draw.text(
            ((img_size - text_width) // 2, img_size + 10),
            label_text,
            fill=(0, 0, 0),
            font=label_font
        )

        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        return img_bytes.getvalue()
