# fastaseek/core/file_utils.py
import os
import logging
from typing import BinaryIO, Union

from fastaseek.exceptions import OpenError

logger = logging.getLogger("fastaseek.file_utils")


def open_binary(file_path: Union[str, os.PathLike]) -> BinaryIO:
    """Open a file for buffered binary reading

    Args:
        file_path: Path to the file

    Returns:
        Open, seekable binary stream. The caller owns it and must close it.

    Raises:
        OpenError: If the file cannot be opened
    """
    try:
        logger.debug(f"Opening file: {file_path} (mode: rb)")
        stream = open(file_path, 'rb')
    except OSError as e:
        error_msg = f"Error opening file {file_path}: {str(e)}"
        logger.error(error_msg)
        raise OpenError(error_msg, {'path': str(file_path), 'errno': e.errno}) from e

    if not stream.seekable():
        stream.close()
        error_msg = f"File is not seekable: {file_path}"
        logger.error(error_msg)
        raise OpenError(error_msg, {'path': str(file_path)})

    return stream
