"""
Comparator — трёхстороннее сравнение magnitude buffers

Сравнение не зависит от длины: ведущие нулевые байты никогда не меняют
результат, поэтому b"\\x00\\xab" == b"\\xab".

Алгоритм compare(a, b):
    diff = |len(a) - len(b)|
    1. Первые diff байтов длинного буфера не имеют пары: любой ненулевой
       байт делает длинный буфер большим.
    2. Далее сравниваются выровненные байты; первое расхождение решает.
    3. Если все выровненные байты совпали — значения равны.
"""

from bufnum.core.math.magnitude import BytesLike


def compare(a: BytesLike, b: BytesLike) -> int:
    """
    Трёхстороннее сравнение (оператор «spaceship»).

    Args:
        a: Первый magnitude buffer
        b: Второй magnitude buffer

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare(b"\\x00\\xab", b"\\xab")
        0
        >>> compare(b"\\xab", b"\\xac")
        -1
    """
    length_difference = abs(len(a) - len(b))

    if len(a) > len(b):
        long_buffer, short_buffer = a, b
        long_is_a = True
    else:
        long_buffer, short_buffer = b, a
        long_is_a = False

    for i in range(len(long_buffer)):
        if i < length_difference:
            # У короткого буфера нет байта этого разряда
            if long_buffer[i] != 0:
                return 1 if long_is_a else -1
        elif long_buffer[i] != short_buffer[i - length_difference]:
            long_is_larger = long_buffer[i] > short_buffer[i - length_difference]
            return 1 if long_is_larger == long_is_a else -1

    return 0


def eq(a: BytesLike, b: BytesLike) -> bool:
    return compare(a, b) == 0


def gt(a: BytesLike, b: BytesLike) -> bool:
    return compare(a, b) > 0


def lt(a: BytesLike, b: BytesLike) -> bool:
    return compare(a, b) < 0


def gte(a: BytesLike, b: BytesLike) -> bool:
    return compare(a, b) >= 0


def lte(a: BytesLike, b: BytesLike) -> bool:
    return compare(a, b) <= 0
