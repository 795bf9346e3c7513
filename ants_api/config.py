"""Protocol parsing policy."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProtocolConfig:
    """Knobs for the codec and driver.

    Attributes:
        strict_parameters (bool): Treat any bad setup line (missing value,
            unknown key, non-integer value) as a ``ProtocolError`` instead of
            logging a warning and skipping it.
    """

    strict_parameters: bool = False


DEFAULT_CONFIG = ProtocolConfig()
