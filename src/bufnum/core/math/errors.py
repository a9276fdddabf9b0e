"""
Errors — иерархия исключений арифметического движка

Все ошибки поднимаются синхронно в точке обнаружения и не перехватываются
внутри движка. Каждая ошибка дополнительно наследует ближайший встроенный
тип, чтобы вызывающий код мог ловить её как ValueError / ZeroDivisionError /
OverflowError.
"""


class BufnumError(Exception):
    """Базовый класс ошибок bufnum."""

    pass


class FormatError(BufnumError, ValueError):
    """
    Невалидная кодировка входа.

    Поднимается при:
    - hex-строке с недопустимыми символами или префиксом
    - байтах, не являющихся валидным UTF-8
    - целом числе вне safe integer range
    """

    pass


class DivisionByZeroError(BufnumError, ZeroDivisionError):
    """Делитель имеет bit_length == 0."""

    pass


class ArithmeticOverflowError(BufnumError, OverflowError):
    """
    Результат не представим в беззнаковом контексте.

    Поднимается при:
    - вычитании, результат которого был бы отрицательным (underflow)
    - переносе при умножении, достигшем MAX_SAFE_INTEGER
    - конверсии в int значения вне safe integer range
    """

    pass
