"""
Core: точная арифметика, многочлены, доменные модели и контракты.

Модуль не зависит от ввода-вывода: все функции — чистые преобразования
над явно переданными значениями.

Целые произвольной точности: при импорте снимается лимит длины
преобразования int <-> str (sys.set_int_max_str_digits), иначе секреты
и коэффициенты длиннее 4300 десятичных цифр не выводятся и не разбираются.
"""

import sys

if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)
