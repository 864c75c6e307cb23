import unittest

from simulator.codec import decode_unary, encode_operands, polynomial
from simulator.tape import BLANK, Tape


class CodecTests(unittest.TestCase):
    def test_encode_layout(self):
        tape = Tape()

        end = encode_operands(tape, 2, 3, 0, 1)

        self.assertEqual(tape.read(0), BLANK)
        self.assertEqual(tape.snapshot(), "1101110" + "0" + "10")
        self.assertEqual(end, 11)
        self.assertEqual(tape.read(end), BLANK)

    def test_encode_all_zero(self):
        tape = Tape()

        encode_operands(tape, 0, 0, 0, 0)

        self.assertEqual(tape.snapshot(), "0000")

    def test_encode_rejects_bad_operands(self):
        tape = Tape()

        for bad in (-1, 1.5, "3", True):
            with self.assertRaises(ValueError):
                encode_operands(tape, 1, bad, 1, 1)
        # Nothing is written when validation fails
        self.assertEqual(tape.snapshot(), "")

    def test_decode_counts_from_offset(self):
        tape = Tape()
        tape.write_run(1, "1110")

        self.assertEqual(decode_unary(tape, 1), 3)
        self.assertEqual(decode_unary(tape, 3), 1)

    def test_decode_zero_length(self):
        tape = Tape()

        self.assertEqual(decode_unary(tape, 1), 0)
        tape.write(1, "0")
        self.assertEqual(decode_unary(tape, 1), 0)

    def test_decode_past_storage(self):
        tape = Tape(capacity=4)

        self.assertEqual(decode_unary(tape, 10**6), 0)

    def test_polynomial(self):
        self.assertEqual(polynomial(2, 3, 4, 5), 38)
        self.assertEqual(polynomial(0, 0, 0, 0), 0)


if __name__ == "__main__":
    unittest.main()
