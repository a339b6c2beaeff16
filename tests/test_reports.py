"""Reports — reply line, Lo Shu text chart and PNG rendering.

Tests:
    - Reply line matches the chat-platform format exactly
    - Missing planet renders as "no planet"
    - Text chart lays counts out in the 4-9-2 / 3-5-7 / 8-1-6 square
    - PNG rendering produces a valid image
"""

from numerology_calculator import NumerologyResult, calc_from_dob
from reports import ReportGenerator, grid_to_json


def test_grid_to_json_is_compact_with_string_keys():
    grid = calc_from_dob("15-08-1985").grid
    assert grid_to_json(grid) == '{"1":2,"2":0,"3":0,"4":0,"5":2,"6":0,"7":0,"8":2,"9":0}'


def test_generate_reply():
    reply = ReportGenerator().generate_reply("15-08-1985", calc_from_dob("15-08-1985"))
    assert reply == (
        "DOB: 15-08-1985\n"
        "Basic Number: 6 (Venus)\n"
        "Destiny Number: 1 (Sun)\n"
        'Grid: {"1":2,"2":0,"3":0,"4":0,"5":2,"6":0,"7":0,"8":2,"9":0}'
    )


def test_generate_reply_without_planet():
    result = NumerologyResult(
        basic_number=0, basic_planet=None,
        destiny_number=0, destiny_planet=None,
        grid={digit: 0 for digit in range(1, 10)},
    )
    reply = ReportGenerator().generate_reply("x", result)
    assert "Basic Number: 0 (no planet)" in reply
    assert "Destiny Number: 0 (no planet)" in reply


def test_grid_chart_layout():
    chart = ReportGenerator().generate_grid_chart(calc_from_dob("15-08-1985"))
    assert chart.splitlines() == [
        "-  | -  | - ",
        "---+----+---",
        "-  | 55 | - ",
        "---+----+---",
        "88 | 11 | - ",
    ]


def test_missing_numbers():
    generator = ReportGenerator()
    assert generator.missing_numbers(calc_from_dob("15-08-1985")) == [2, 3, 4, 6, 7, 9]


def test_text_report_contains_numbers_and_chart():
    report = ReportGenerator().generate_text_report("15-08-1985", calc_from_dob("15-08-1985"))
    assert "DOB: 15-08-1985" in report
    assert "Basic Number:   6 (Venus)" in report
    assert "Destiny Number: 1 (Sun)" in report
    assert "Missing numbers: 2, 3, 4, 6, 7, 9" in report


def test_visual_grid_is_png():
    image = ReportGenerator().generate_visual_grid(calc_from_dob("15-08-1985"))
    assert image.startswith(b"\x89PNG\r\n\x1a\n")
