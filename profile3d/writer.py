"""Write rendered SVG files to the output directory."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_file(file_name: str, content: str, output_dir: Path) -> Path:
    """Write ``content`` to ``output_dir / file_name``, creating parent dirs."""
    output_path = output_dir / file_name
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", output_path, len(content))
    return output_path
