"""Engine error codes and exceptions.

Code ranges:
  3xxx: Market lookup
  4xxx: Invalid argument
  5xxx: Invariant violation
"""


class EngineError(Exception):
    """Base engine error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 3xxx: Market lookup ---

class MarketNotFoundError(EngineError):
    def __init__(self, market_id: str) -> None:
        self.market_id = market_id
        super().__init__(3001, f"Market not found: {market_id}")


class MarketNotOpenError(EngineError):
    def __init__(self, market_id: str, status: str) -> None:
        self.market_id = market_id
        super().__init__(3002, f"Market {market_id} is {status}, not open for trading")


# --- 4xxx: Invalid argument ---

class InvalidArgumentError(EngineError):
    def __init__(self, detail: str, code: int = 4000) -> None:
        super().__init__(code, detail)


class InvalidOutcomeError(InvalidArgumentError):
    def __init__(self, market_id: str, outcome_index: int) -> None:
        super().__init__(f"Outcome {outcome_index} does not exist in market {market_id}", 4001)


class SlippageExceededError(InvalidArgumentError):
    def __init__(self, quoted: float, projected: float, tolerance_pct: float) -> None:
        super().__init__(
            f"Price would move from {quoted:.4f} to {projected:.4f}, beyond {tolerance_pct}% tolerance",
            4002,
        )


# --- 5xxx: Invariant violation ---

class InvariantViolationError(EngineError):
    def __init__(self, detail: str, code: int = 5000) -> None:
        super().__init__(code, detail)


class MarketAlreadyResolvedError(InvariantViolationError):
    def __init__(self, market_id: str, resolved_outcome: int) -> None:
        super().__init__(f"Market {market_id} already resolved to outcome {resolved_outcome}", 5001)


class MarketNotResolvedError(InvariantViolationError):
    def __init__(self, market_id: str) -> None:
        super().__init__(f"Market {market_id} is not resolved", 5002)


class WinningsAlreadyClaimedError(InvariantViolationError):
    def __init__(self, market_id: str, account: str) -> None:
        super().__init__(f"Winnings for {account} in market {market_id} already claimed", 5003)
