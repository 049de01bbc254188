"""
NumberList — Immutable список чисел

Элементы: стандартные числа (int, float, Decimal) или None.
Пустые списки представлены общим экземпляром NumberList.EMPTY.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import ClassVar, Optional, Union, overload

from numsym.core.math.numerical_safeguards import is_number

Number = Union[int, float, Decimal]


class NumberList(Sequence):
    """
    Immutable последовательность чисел, допускающая None элементы.

    Создание только через NumberList.with_(numbers).
    """

    EMPTY: ClassVar["NumberList"]

    __slots__ = ("_numbers",)

    def __init__(self, numbers: tuple[Optional[Number], ...]):
        self._numbers = numbers

    @classmethod
    def with_(cls, numbers: Iterable[Optional[Number]]) -> "NumberList":
        """
        Фабрика из любой коллекции чисел.

        Args:
            numbers: Числа или None

        Returns:
            numbers если это уже NumberList, EMPTY для пустого ввода,
            иначе новый NumberList с копией элементов

        Raises:
            TypeError: numbers is None или элемент не является числом/None
        """
        if numbers is None:
            raise TypeError("numbers must not be None")
        if isinstance(numbers, NumberList):
            return numbers

        copy = tuple(numbers)
        for index, number in enumerate(copy):
            if number is not None and not is_number(number):
                raise TypeError(f"Element {index} is not a number: {number!r}")

        return cls(copy) if copy else cls.EMPTY

    def set_elements(self, numbers: Iterable[Optional[Number]]) -> "NumberList":
        """Возвращает self если элементы не изменились, иначе новый NumberList"""
        copy = NumberList.with_(numbers)
        return self if self == copy else copy

    @overload
    def __getitem__(self, index: int) -> Optional[Number]: ...

    @overload
    def __getitem__(self, index: slice) -> "NumberList": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return NumberList.with_(self._numbers[index])
        return self._numbers[index]

    def __len__(self) -> int:
        return len(self._numbers)

    def __eq__(self, other) -> bool:
        if isinstance(other, NumberList):
            return self._numbers == other._numbers
        if isinstance(other, (list, tuple)):
            return self._numbers == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._numbers)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._numbers)!r})"


NumberList.EMPTY = NumberList(())
