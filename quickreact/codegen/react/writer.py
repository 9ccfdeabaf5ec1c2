"""Write generated artifacts into a project directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from quickreact.config import OutputLayout

from .utils import ensure_directory, write_file

if TYPE_CHECKING:
    from .main import Artifact

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[List[Path]], bool]


@dataclass
class WriteResult:
    """Outcome of one ``write_artifacts`` call."""

    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    cancelled: bool = False


def existing_targets(artifacts: Sequence["Artifact"], output_dir: Path) -> List[Path]:
    """Artifact paths under ``output_dir`` that already exist on disk."""
    return [output_dir / artifact.path for artifact in artifacts if (output_dir / artifact.path).exists()]


def write_artifacts(
    artifacts: Sequence["Artifact"],
    output_dir: Path,
    *,
    layout: Optional[OutputLayout] = None,
    confirm: Optional[ConfirmCallback] = None,
) -> WriteResult:
    """
    Write ``artifacts`` below ``output_dir``.

    The scaffold directories (components, images, assets) are created first.
    When the layout asks for confirmation and some targets already exist,
    ``confirm`` receives those paths; a False answer cancels the whole write
    and nothing is touched. Without a callback existing files are overwritten.

    Args:
        artifacts: Generated files, with paths relative to ``output_dir``
        output_dir: Project directory
        layout: Output layout (scaffold directories, overwrite policy)
        confirm: Callback asked before overwriting existing files

    Returns:
        ``WriteResult`` listing written paths, or ``cancelled=True``
    """
    layout = layout or OutputLayout()
    output_dir = Path(output_dir)

    existing = existing_targets(artifacts, output_dir)
    if existing and layout.confirm_overwrite and confirm is not None:
        if not confirm(existing):
            logger.info("Generation cancelled; %d existing files left untouched", len(existing))
            return WriteResult(skipped=[output_dir / artifact.path for artifact in artifacts], cancelled=True)

    ensure_directory(output_dir)
    for directory in layout.scaffold_dirs:
        ensure_directory(output_dir / directory)

    result = WriteResult()
    for artifact in artifacts:
        target = output_dir / artifact.path
        write_file(target, artifact.content)
        result.written.append(target)
        logger.debug("Wrote %s (%d bytes)", target, len(artifact.content))
    return result


__all__ = ["ConfirmCallback", "WriteResult", "existing_targets", "write_artifacts"]
