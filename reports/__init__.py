"""Генерация ответов и отчетов"""
from .generator import ReportGenerator, grid_to_json

__all__ = ['ReportGenerator', 'grid_to_json']
