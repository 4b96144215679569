"""Merge — слияние манхэттенских областей через поворот на 45°.

Используется алгоритмами построения деревьев Штейнера и вставки буферов
для выбора точки, сбалансированной по расстоянию до двух терминалов.
"""

from .merge_obj import MergeObj

__all__ = [
    "MergeObj",
]
