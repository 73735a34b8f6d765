"""Configuration for the advcalc package."""
import os

# Overridden by ADVCALC_LOG_LEVEL, read again when logging is configured
LOG_LEVEL = os.getenv("ADVCALC_LOG_LEVEL", "WARNING")

# Binary operators understood by Accumulator.apply
BINARY_OPERATORS = "+-*/"

# Unary actions and classification kinds
FACTORIAL_ACTION = "!"
ARMSTRONG = "A"
PERFECT = "P"

# Factorial is defined for accumulated values in [FACTORIAL_MIN, FACTORIAL_MAX]
FACTORIAL_MIN = 0.0
FACTORIAL_MAX = 10.0

# Smallest truncated value accepted by classification
CLASSIFY_MIN = 1

# Integer parts and unary results are signed 32-bit integers
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
