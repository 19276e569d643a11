from pathlib import Path

MAX_FILE_BYTES = 5 * 1024 * 1024
TEXT_SUFFIXES = (".txt", ".md", ".markdown")


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, TXT, MD) and return its plain text."""
    path = Path(file_path)
    if path.stat().st_size > MAX_FILE_BYTES:
        raise ValueError("File size must be less than 5MB")
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return _parse_pdf(path)
    elif suffix in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8").strip()
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}. Please upload a PDF, TXT, or Markdown file")


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    pages = []
    for page in doc:
        pages.append(page.get_text())
    doc.close()
    return "\n\n".join(p.strip() for p in pages if p.strip())
