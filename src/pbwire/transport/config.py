"""Configuration for mock transport simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class MockTransportConfig:
    """Configuration for the in-process mock packet driver.

    Attributes:
        latency: Simulated round-trip delay in seconds (default 0.0)
        failure_probability: Probability that a call raises TransportError
            (default 0.0; 1.0 fails every call)
        seed: Seed for the failure draw, for reproducible runs

    Examples:
        ```python
        from pbwire.transport import MockPacketDriver, MockTransportConfig

        driver = MockPacketDriver(MockTransportConfig(latency=0.05))
        ```
    """

    latency: float = 0.0
    failure_probability: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.latency < 0:
            raise ValueError(f"latency must be >= 0, got {self.latency}")

        if not 0.0 <= self.failure_probability <= 1.0:
            raise ValueError(
                f"failure_probability must be 0.0-1.0, got {self.failure_probability}"
            )
