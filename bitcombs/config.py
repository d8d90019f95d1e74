"""Configuration classes for bitcombs enumeration."""

from dataclasses import dataclass

from bitcombs.types import INDEX_BITS


@dataclass
class EnumerationConfig:
    """Limits applied to subset enumeration."""

    # Widest index supported; longer inputs raise OverflowError
    max_index_bits: int = INDEX_BITS

    # Materializing calls warn above this input length
    warn_length: int = 30

    def check_length(self, n: int) -> int:
        """Return ``n`` if an index of ``n`` bits is addressable.

        Raises:
            OverflowError: If ``n`` exceeds ``max_index_bits``.
        """
        if n > self.max_index_bits:
            raise OverflowError(
                f"Input of length {n} needs a {n}-bit index; "
                f"at most {self.max_index_bits} bits are supported."
            )
        return n

    def should_warn(self, n: int) -> bool:
        """Whether materializing ``2**n - 1`` results deserves a warning."""
        return n > self.warn_length


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()
