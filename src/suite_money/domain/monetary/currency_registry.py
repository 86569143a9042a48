from suite_money.domain.monetary.currency import Currency


USD = Currency("USD", 2, "US Dollar")
EUR = Currency("EUR", 2, "Euro")
GBP = Currency("GBP", 2, "British Pound")
CHF = Currency("CHF", 2, "Swiss Franc")
JPY = Currency("JPY", 0, "Japanese Yen")
CZK = Currency("CZK", 2, "Czech Koruna")

# ISO 4217 code for transactions where no currency is involved
XXX = Currency("XXX", 0, "No currency")

PREDEFINED_CURRENCIES = (USD, EUR, GBP, CHF, JPY, CZK, XXX)

# Register all predefined currencies
for _currency in PREDEFINED_CURRENCIES:
    Currency.register(_currency, overwrite=True)
