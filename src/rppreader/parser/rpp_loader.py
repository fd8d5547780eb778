from pathlib import Path


def normalize_text(text: str) -> str:
    """
    Normalize raw RPP text before block extraction.

    A leading byte-order mark is dropped, line endings become "\\n", every
    line loses its indentation and trailing whitespace, and blank lines are
    dropped.
    """
    text = text.lstrip("\ufeff")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def load_rpp(path: Path) -> str:
    """Load a REAPER .rpp project file and return its text."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() != ".rpp":
        raise ValueError(f"Unsupported file type: {path.suffix}")

    # REAPER writes UTF-8; damaged bytes in names should not abort a parse
    return path.read_bytes().decode("utf-8-sig", errors="replace")
