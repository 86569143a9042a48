from __future__ import annotations

from typing import Dict


class Currency:
    """Currency identified by its code, with its default number of fraction digits.

    Currencies are immutable. Two currencies are equal when their codes are equal.

    Attributes:
        code (str): Currency code (e.g., "CHF", "USD").
        precision (int): Default number of fraction digits (0-18).
        name (str): Full currency name.
    """

    __slots__ = ("_code", "_precision", "_name")

    # Class-level registry used to resolve currencies from their codes
    _registry: Dict[str, "Currency"] = {}

    def __init__(self, code: str, precision: int, name: str):
        # Raise: code must be a non-empty string without inner whitespace
        if not isinstance(code, str) or not code.strip() or len(code.split()) != 1:
            raise ValueError(f"$code must be a non-empty string without whitespace, but provided value is: '{code}'")

        # Raise: precision must be a small non-negative integer
        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        # Raise: name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()

    @property
    def code(self) -> str:
        return self._code

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def name(self) -> str:
        return self._name

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register $currency so that it can be resolved by `from_str`.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to replace an already registered currency with the same code.

        Raises:
            TypeError: If $currency is not a Currency instance.
            ValueError: If the code is already registered and $overwrite is False.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Resolve a registered currency by its $code.

        Lookup ignores letter case, so 'chf' resolves to CHF.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The registered currency.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If no currency is registered under $code.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        normalized = code.upper().strip()
        if normalized not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {sorted(cls._registry)}")

        return cls._registry[normalized]

    @classmethod
    def is_registered(cls, code: str) -> bool:
        return isinstance(code, str) and code.upper().strip() in cls._registry

    def __eq__(self, other) -> bool:
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}')"
