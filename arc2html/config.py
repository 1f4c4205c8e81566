"""Configuration for the Arc bookmarks converter."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ExportConfig:
    """Where to read the sidebar from and where to write bookmarks to."""
    input_path: Optional[Path] = None  # None = look in the usual places
    output_path: Optional[Path] = None  # None = dated file in cwd
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Create config from environment variables."""
        input_str = os.environ.get("ARC2HTML_INPUT")
        output_str = os.environ.get("ARC2HTML_OUTPUT")

        return cls(
            input_path=Path(input_str) if input_str else None,
            output_path=Path(output_str) if output_str else None,
            verbose=os.environ.get("ARC2HTML_VERBOSE", "").strip().lower() in TRUE_VALUES,
        )
