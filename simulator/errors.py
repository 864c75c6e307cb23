class MachineError(Exception):
    """Base class for everything the two-tape engine raises."""


class AbnormalHalt(MachineError):
    """The machine stopped somewhere other than the final state."""

    reason = "abnormal halt"

    def __init__(self, state, symbols, message=None):
        self.state = state
        self.symbols = tuple(symbols)
        super().__init__(message or f"{self.reason} at state {state} reading {self.symbols}")


class MissingTransition(AbnormalHalt):
    reason = "no transition"


class HeadOutOfBounds(AbnormalHalt):
    reason = "head moved left of offset 0"


class StepLimitExceeded(MachineError):
    def __init__(self, steps):
        self.steps = steps
        super().__init__(f"Step limit of {steps:,} reached before the final state")


class RuleTableError(MachineError):
    pass


class DuplicateRuleError(RuleTableError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Duplicate rule for state {key.state} reading ({key.read1}, {key.read2})")


class MachineNotReset(MachineError):
    pass
