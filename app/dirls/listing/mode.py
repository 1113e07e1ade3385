"""Conversion of POSIX mode bits to the ``ls -l`` permission string."""

# Mask selecting the file type from st_mode
S_IFMT = 0o170000

_TYPE_CHARS: dict[int, str] = {
    0o140000: "s",  # socket
    0o060000: "b",  # block device
    0o040000: "d",  # directory
    0o100000: "-",  # regular file
    0o120000: "l",  # symbolic link
    0o020000: "c",  # character device
    0o010000: "p",  # FIFO
}


def format_mode(mode: int) -> str:
    """Render mode bits as a 10-character string like ``drwxr-xr-x``.

    The first character is the file type (``?`` if unknown), followed by
    read/write/execute flags for owner, group and other. Setuid, setgid
    and sticky bits are not rendered.

    Args:
        mode: POSIX ``st_mode`` value.

    Returns:
        Type character followed by nine permission characters.
    """
    file_type = _TYPE_CHARS.get(mode & S_IFMT, "?")
    permissions = mode & 0o777

    chars: list[str] = []
    for shift in (6, 3, 0):
        bits = (permissions >> shift) & 0o7
        chars.append("r" if bits & 0b100 else "-")
        chars.append("w" if bits & 0b010 else "-")
        chars.append("x" if bits & 0b001 else "-")

    return file_type + "".join(chars)
