import logging
from typing import Optional

from rfcdoctool.commands import CommandRegistry
from rfcdoctool.config.document_config import DocumentConfig
from rfcdoctool.models import CommandResult, ErrorCode
from rfcdoctool.utils.file_utils import read_file_content, write_file_atomic

logger = logging.getLogger(__name__)


def process_file(
    file_path: str,
    command: str,
    config: Optional[DocumentConfig] = None,
    in_place: bool = False,
) -> CommandResult:
    """Run a registered command against the file at ``file_path``.

    With ``in_place`` a successful transform is written back atomically.
    Raises FileNotFoundError or PermissionError when the file cannot be read.
    """
    handler = CommandRegistry.get(command)
    if handler is None:
        return CommandResult.failure(
            ErrorCode.INVALID_ARGUMENT,
            f"Unknown command: {command}",
            details=f"Available commands: {', '.join(CommandRegistry.names())}",
        )

    content = read_file_content(file_path)
    logger.info(f"Running {command} on {file_path}")
    result = handler(content, file_path, config)

    if in_place and result.success and result.result is not None:
        if result.result == content:
            logger.info(f"{file_path} is already up to date")
        else:
            write_file_atomic(file_path, result.result)
    return result
