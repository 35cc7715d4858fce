"""Configuration for hosts and the command-line tool.

This module provides the CodecConfig dataclass, which names the field
specification to load and the framing options used when parsing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .models.message import TRANSPORT_HEADER_LENGTH
from .spec.registry import FieldSpecRegistry


@dataclass
class CodecConfig:
    """Codec configuration.

    Attributes:
        spec_path: YAML field-specification file (required by load_registry)
        transport_header: Expect a transport header (TPDU) before the MTI
        transport_header_length: Size of the transport header in bytes; only 5
            is supported
        secondary_bitmap: Build new messages with a 128-bit bitmap
        log_level: Level name for the ``isocodec`` logger

    Examples:
        ```python
        from isocodec.config import CodecConfig

        config = CodecConfig(spec_path="examples/spec1987pos.yml", transport_header=True)
        registry = config.load_registry()
        msg = parse(registry, data, transport_header=config.transport_header)
        ```
    """

    spec_path: Optional[Union[str, Path]] = None
    transport_header: bool = False
    transport_header_length: int = TRANSPORT_HEADER_LENGTH
    secondary_bitmap: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.spec_path is not None:
            self.spec_path = Path(self.spec_path)

        if self.transport_header_length != TRANSPORT_HEADER_LENGTH:
            raise ValueError(
                f"transport_header_length must be {TRANSPORT_HEADER_LENGTH}, "
                f"got {self.transport_header_length}"
            )

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")

    def load_registry(self) -> FieldSpecRegistry:
        """Load the registry named by spec_path.

        Raises:
            ValueError: If spec_path is not set
            InvalidSpecError: If the file cannot be loaded
        """
        if self.spec_path is None:
            raise ValueError("spec_path is not set")
        return FieldSpecRegistry.from_yaml(self.spec_path)
