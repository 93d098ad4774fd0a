"""
data_model/documents.py — wycinki (spany) dokumentu HTML.

BlockSpan odpowiada jednemu zrównoważonemu kontenerowi (np. karcie
`<div class="card">`) znalezionemu w migawce strony. Span nie jest
modyfikowany — tylko odczytywany i kopiowany dalej jako tekst.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BlockSpan:
    start: int           # offset '<' tagu otwierającego
    end: int             # offset za '>' tagu zamykającego (wyłączny)
    text: str            # document[start:end]

    def __len__(self) -> int:
        return self.end - self.start


# Dokument to nieprzezroczysty tekst HTML (bez schematu).
type Document = str
