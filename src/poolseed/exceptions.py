"""Exception hierarchy for poolseed.

All exceptions derive from PoolSeedError, so the command line can turn any
failure into a diagnostic and a nonzero exit status at a single boundary.
None of these conditions is recoverable: there is no retry and no fallback.
"""


class PoolSeedError(Exception):
    """Base exception for all poolseed errors."""


class EntropyUnavailableError(PoolSeedError):
    """The entropy source cannot be opened or has been closed."""


class AllocationError(PoolSeedError):
    """The scratch buffer for a block could not be allocated.

    The message is the fixed diagnostic reason; the block that failed is
    kept in :attr:`block_name` and :attr:`word_count`.
    """

    def __init__(self, block_name: str, word_count: int) -> None:
        super().__init__("buffer allocation failed")
        self.block_name = block_name
        self.word_count = word_count


class ShortReadError(PoolSeedError):
    """The entropy source returned fewer bytes than requested.

    Short reads are never retried. A partially filled block is discarded
    and nothing is printed for it. The byte counts are kept in
    :attr:`requested` and :attr:`received`.
    """

    def __init__(self, requested: int, received: int) -> None:
        super().__init__("read() failed")
        self.requested = requested
        self.received = received


class ReplacementLimitError(PoolSeedError):
    """A single word was replaced more times than the configured cap allows."""


class ConfigValidationError(PoolSeedError):
    """Configuration field validation failed."""
