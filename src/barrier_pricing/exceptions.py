class BarrierPricingError(Exception):
    """Base class for every error raised while building or valuing a trade."""


class MalformedConfigurationError(BarrierPricingError, ValueError):
    """Raised when trade data is missing, unparsable or out of range.

    Typical causes are a missing required field, a non-positive amount or
    barrier level, or a negative rebate.
    """


class UnsupportedStructureError(BarrierPricingError, ValueError):
    """Raised when trade data is well-formed but describes a structure that
    cannot be replicated statically.

    This covers non-European option or barrier styles, more than one exercise
    date or barrier level, and trade actions attached to the option.
    """


class UnknownBarrierTypeError(BarrierPricingError, ValueError):
    """Raised when a barrier kind falls outside ``UpIn/UpOut/DownIn/DownOut``.

    Trade data validation rejects such input first, so reaching this error
    from :func:`barrier_pricing.replication.replicate` indicates a caller that
    skipped validation.
    """


class NoEngineFoundError(BarrierPricingError, LookupError):
    """Raised when the engine factory has no builder for an instrument class."""


class WrongBuilderKindError(BarrierPricingError, TypeError):
    """Raised when the builder registered under a name has the wrong class."""


class EngineNotAttachedError(BarrierPricingError, RuntimeError):
    """Raised when a value is requested from a leg without a pricing engine."""


class DuplicateEngineError(BarrierPricingError, RuntimeError):
    """Raised when a pricing engine is attached to the same leg twice."""


class MissingMarketDataError(BarrierPricingError, LookupError):
    """Raised when a spot, curve or volatility needed by an engine is absent."""
