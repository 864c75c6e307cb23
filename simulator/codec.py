"""Unary encoding of the operands onto tape 1 and decoding of the result from tape 2."""

ONE = "1"
DELIMITER = "0"


def check_operand(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Operands must be integers, got {value!r}")
    if value < 0:
        raise ValueError(f"Operands must be non-negative, got {value}")
    return value


def encode_operands(tape, *operands):
    """Write blank at offset 0, then `1`*n + `0` for every operand from offset 1.

    Returns the first offset after the input.
    """
    for value in operands:
        check_operand(value)
    tape.write(0, tape.blank)
    return tape.write_run(1, "".join(ONE * n + DELIMITER for n in operands))


def decode_unary(tape, offset):
    """Count the `1` cells starting at `offset`; the first other cell ends the run."""
    return tape.run_length(offset, ONE)


def polynomial(a, x, b, y):
    return a * x * x + b * y
