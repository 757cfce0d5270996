from typing import BinaryIO

from adsecdesc.commons.exceptions import InsufficientDataError


def read_exact(buff: BinaryIO, size: int, what: str = None) -> bytes:
    """
    Reads exactly `size` bytes from the stream.
    :param buff: binary stream positioned at the first byte to read
    :param size: number of bytes to read
    :param what: field name used in the error message
    :raises InsufficientDataError: the stream ends before `size` bytes
    :return: bytes
    """

    data = buff.read(size)
    if len(data) != size:
        raise InsufficientDataError(size, len(data), what)
    return data


def read_uint(buff: BinaryIO, size: int, what: str = None) -> int:
    return int.from_bytes(read_exact(buff, size, what), "little", signed=False)
