"""Quickstart example for numscope.

Shows the three formatter styles, the abbreviation/sign/precision policies,
zero handling, and parsing display strings back to Decimal.

Note: Examples format a handful of literal values; in production, build one
formatter per locale and style and reuse it.
"""

from decimal import Decimal

from numscope import Abbreviation, NumberFormatter, Precision, Sign, SignStyle
from numscope.parsing import is_valid_decimal, parse_decimal

# Example 1: Currency dashboard figures
print("=" * 50)
print("Example 1: Currency With Abbreviation")
print("=" * 50)

usd = NumberFormatter.currency("en_US", "USD")
print(usd.format(1432.99, abbreviation=Abbreviation.DEFAULT))
# Output: $1.43k
print(usd.format(-4236, abbreviation=Abbreviation.DEFAULT))
# Output: -$4.24k
print(usd.format(123.456, sign=Sign.ARROW))
# Output: ▲$123.46

# Example 2: Precision policies
print("\n" + "=" * 50)
print("Example 2: Precision")
print("=" * 50)

decimal = NumberFormatter.decimal("en_US")
print(decimal.format(0.123456789, precision=Precision.constant(4)))
# Output: 0.1235
print(decimal.format(1.5, precision=Precision.at_least(3)))
# Output: 1.500
print(decimal.format(0.125))
# Output: 0.13 (half away from zero)

# Example 3: Zero
print("\n" + "=" * 50)
print("Example 3: Zero Handling")
print("=" * 50)

print(decimal.format(-0.001, sign=Sign.BOTH))
# Output: 0
decimal.uses_sign_for_zero = True
delta = Sign(plus=SignStyle.custom("+"), minus=SignStyle.custom("-"), zero=SignStyle.custom("="))
print(decimal.format(0, sign=delta))
# Output: =0

# Example 4: Other locales
print("\n" + "=" * 50)
print("Example 4: Locales")
print("=" * 50)

eur = NumberFormatter.currency("de_DE", "EUR")
print(eur.format(48729432, abbreviation=Abbreviation.CAPITALIZED))
# Output: 48,73M €
print(NumberFormatter.currency("en_US@currency=PLN").format(-1))
# Output: -PLN1.00
print(NumberFormatter.percent("en_US").format(12.5))
# Output: 12.5%

# Example 5: Parsing
print("\n" + "=" * 50)
print("Example 5: Parsing Display Strings")
print("=" * 50)

print(usd.parse("-$1,432.99"))
# Output: -1432.99
amount, errors = parse_decimal("1 234,56", "lv_LV")
if is_valid_decimal(amount):
    print(amount * Decimal("1.21"))
for error in errors:
    print(error)
