ADD_DESCRIPTION = """
Add two numbers and return the sum (a + b).

Parameters:
- a: the first addend (number)
- b: the second addend (number)

Example: add(a=2.5, b=3.5) -> 6.0
"""

SUBTRACT_DESCRIPTION = """
Subtract the second number from the first and return the difference (a - b).

Parameters:
- a: the minuend (number)
- b: the subtrahend (number)

Example: subtract(a=5, b=2.5) -> 2.5
"""

MULTIPLY_DESCRIPTION = """
Multiply two numbers and return the product (a * b).

Parameters:
- a: the first factor (number)
- b: the second factor (number)

Example: multiply(a=4, b=2.5) -> 10.0
"""

DIVIDE_DESCRIPTION = """
Divide the first number by the second and return the quotient (a / b).

Parameters:
- a: the dividend (number)
- b: the divisor (number, must not be zero)

Dividing by zero fails with the error "Cannot divide by zero".

Example: divide(a=10, b=2) -> 5.0
"""

IS_PRIME_DESCRIPTION = """
Check whether an integer is a prime number.

Parameters:
- n: the integer to test (signed 64-bit range)

Returns true if n is prime, false otherwise. Numbers below 2 are never prime.

Example: is_prime(n=29) -> true
"""
