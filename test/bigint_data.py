"""
Data-driven test rows with big integer literals.

Values too long to read as int literals are written as decimal strings;
they are coerced to int before the row reaches the test.
"""

INT64_MAX = 2**63 - 1
INT64_MIN = -2**63


def bigint(x):
    if isinstance(x, str):
        return int(x)
    return x


def bigint_rows(*rows):
    return [tuple(bigint(x) for x in row) for row in rows]
