import time
from dataclasses import dataclass, field
from typing import Optional

from simulator.codec import DELIMITER, ONE, check_operand, decode_unary, encode_operands
from simulator.errors import AbnormalHalt, HeadOutOfBounds, MachineNotReset, MissingTransition, StepLimitExceeded
from simulator.rules import TransitionKey
from simulator.tape import BLANK, Tape

INITIAL_STATE = 0
FINAL_STATE = 999999999
START_OFFSET = 1

STATUS_HALTED = "halted"
STATUS_ABNORMAL = "abnormal"
STATUS_STEP_LIMIT = "step_limit"


@dataclass
class ComputeResult:
    operands: tuple
    status: str
    value: Optional[int] = None
    state: int = INITIAL_STATE
    symbols: tuple = ()
    steps: int = 0
    cpu_time: float = 0.0
    reason: str = ""
    tapes: tuple = field(default=("", ""), repr=False)

    @property
    def ok(self):
        return self.status == STATUS_HALTED

    def as_entry(self):
        """Flat dict for the JSON-lines logs."""
        a, x, b, y = self.operands
        entry = {
            "a": a, "x": x, "b": b, "y": y,
            "status": self.status,
            "value": self.value,
            "steps": self.steps,
            "cpu_time": round(self.cpu_time, 6),
        }
        if not self.ok:
            entry.update({
                "state": self.state,
                "symbols": list(self.symbols),
                "reason": self.reason,
                "tape1": self.tapes[0],
                "tape2": self.tapes[1],
            })
        return entry


class TwoTapeMachine:
    def __init__(self, rules, blank=BLANK, final_state=FINAL_STATE):
        if blank in (ONE, DELIMITER):
            raise ValueError(f"Blank symbol {blank!r} collides with the unary encoding")
        self.rules = rules
        self.blank = blank
        self.final_state = final_state
        self.tape1 = Tape(blank)
        self.tape2 = Tape(blank)
        self.reset()

    @property
    def halted(self):
        return self.current_state == self.final_state

    def configuration(self):
        return TransitionKey(self.current_state, self.tape1.read(self.head1), self.tape2.read(self.head2))

    def step(self):
        if self.halted:
            return
        key = self.configuration()
        action = self.rules.lookup(key)
        if action is None:
            raise MissingTransition(key.state, (key.read1, key.read2))
        head1 = self.head1 + action.move1
        head2 = self.head2 + action.move2
        if head1 < 0 or head2 < 0:
            raise HeadOutOfBounds(key.state, (key.read1, key.read2))
        self.tape1.write(self.head1, action.write1)
        self.tape2.write(self.head2, action.write2)
        self.current_state = action.next_state
        self.head1, self.head2 = head1, head2
        self.steps += 1

    def run(self, max_steps=None, on_step=None):
        """Step until the final state. Returns the number of steps taken."""
        while not self.halted:
            if max_steps and self.steps >= max_steps:
                raise StepLimitExceeded(self.steps)
            self.step()
            if on_step is not None:
                on_step(self)
        return self.steps

    def compute(self, a, x, b, y, max_steps=None, on_step=None):
        """Evaluate a*x^2 + b*y on the tapes; abnormal endings come back in the result."""
        if self.steps or self.current_state != INITIAL_STATE or self.tape1.last or self.tape2.last:
            raise MachineNotReset("reset() before compute: the machine is not in its initial configuration")
        operands = tuple(check_operand(v) for v in (a, x, b, y))
        encode_operands(self.tape1, *operands)

        start = time.process_time()
        try:
            self.run(max_steps=max_steps, on_step=on_step)
        except AbnormalHalt as e:
            return self._failure(operands, STATUS_ABNORMAL, e.state, e.symbols, e.reason, start)
        except StepLimitExceeded as e:
            key = self.configuration()
            return self._failure(operands, STATUS_STEP_LIMIT, key.state, (key.read1, key.read2), str(e), start)
        cpu_time = time.process_time() - start

        return ComputeResult(
            operands=operands,
            status=STATUS_HALTED,
            value=decode_unary(self.tape2, self.head2),
            state=self.current_state,
            steps=self.steps,
            cpu_time=cpu_time,
            tapes=self.snapshot(),
        )

    def _failure(self, operands, status, state, symbols, reason, start):
        return ComputeResult(
            operands=operands,
            status=status,
            state=state,
            symbols=tuple(symbols),
            steps=self.steps,
            cpu_time=time.process_time() - start,
            reason=reason,
            tapes=self.snapshot(),
        )

    def reset(self):
        self.tape1.clear()
        self.tape2.clear()
        self.current_state = INITIAL_STATE
        self.head1 = self.head2 = START_OFFSET
        self.steps = 0

    def snapshot(self):
        return self.tape1.snapshot(), self.tape2.snapshot()

    def visualize(self, window=10):
        """Text window around both heads, one tape per pair of lines."""
        lines = []
        for tape, head in ((self.tape1, self.head1), (self.tape2, self.head2)):
            tape_range = range(max(0, head - window), head + window + 1)
            lines.append(" ".join(tape.peek(pos) for pos in tape_range))
            lines.append(" ".join("^" if pos == head else " " for pos in tape_range).rstrip())
        lines.append(f"State: {self.current_state}, Halted: {self.halted}, Steps: {self.steps}")
        return "\n".join(lines)
