def chunk_text(text: str, chunk_size: int) -> list[str]:
    """Split text into pieces of at most ``chunk_size`` characters.

    Paragraphs (separated by blank lines) are kept together where they fit;
    a paragraph longer than ``chunk_size`` is cut at the size boundary.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    chunks: list[str] = []
    current = ""
    for paragraph in (p.strip() for p in text.split("\n\n")):
        if not paragraph:
            continue
        while len(paragraph) > chunk_size:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(paragraph[:chunk_size])
            paragraph = paragraph[chunk_size:]
        candidate = f"{current}\n\n{paragraph}" if current else paragraph
        if len(candidate) > chunk_size:
            chunks.append(current)
            current = paragraph
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks
