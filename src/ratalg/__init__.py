"""
ratalg — символьный движок алгебры рациональных функций.

Построение, вычисление, дифференцирование, интегрирование (символьное и
численное), упрощение и раскрытие скобок для отношений полиномов.
"""

__version__ = "0.1.0"
