"""Reading ledger documents from disk."""

from pathlib import Path

from mdledger.domain.errors import SourceUnavailableError


def read_ledger_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read a ledger file into lines.

    Args:
        path: Path to the markdown ledger.
        encoding: Text encoding of the file.

    Returns:
        Lines without their line endings.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded.
    """
    try:
        with open(path, encoding=encoding) as f:
            return f.read().splitlines()
    except FileNotFoundError as e:
        raise SourceUnavailableError(path, "file not found") from e
    except IsADirectoryError as e:
        raise SourceUnavailableError(path, "is a directory") from e
    except UnicodeDecodeError as e:
        raise SourceUnavailableError(path, f"not valid {encoding} text") from e
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e
